from __future__ import annotations

import hashlib
import os
from pathlib import Path


def identity_tag(database: str) -> str:
    """
    Deterministic identity of a logical database: hex MD5 of the UTF-8 name.

    Any implementation hashing the same name gets the same file name.
    """
    return hashlib.md5(database.encode("utf-8")).hexdigest()


def db_file_name(database: str) -> str:
    return f"{identity_tag(database)}.json"


def db_file_path(base_path: str | Path, database: str) -> Path:
    """
    Resolve the on-disk file for `database`.

    A `str` base path is a prefix (`"./data/"` -> `./data/<tag>.json`), a `Path`
    is a directory.
    """
    if isinstance(base_path, Path):
        return base_path / db_file_name(database)
    return Path(f"{os.fspath(base_path)}{db_file_name(database)}")


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
