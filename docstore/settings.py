from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    # Prefix prepended to "<identity tag>.json"
    base_path: str

    # Persisted JSON layout (None = compact)
    json_indent: int | None

    # Take an OS flock around each write
    lock_writes: bool

    # Debug
    debug_log_io: bool


def get_settings(env_file: str | None = "local.env") -> Settings:
    if env_file:
        # Real environment variables win over the file.
        load_dotenv(env_file, override=False)

    base_path = os.getenv("DOCSTORE_BASE_PATH", "./data/")
    json_indent = _env_int("DOCSTORE_JSON_INDENT")
    lock_writes = _env_bool("DOCSTORE_LOCK_WRITES", True)
    debug_log_io = _env_bool("DOCSTORE_DEBUG_LOG_IO", False)

    return Settings(
        base_path=base_path,
        json_indent=json_indent,
        lock_writes=lock_writes,
        debug_log_io=debug_log_io,
    )
