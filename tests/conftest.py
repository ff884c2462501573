from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep DOCSTORE_* variables from the developer's shell out of the tests.
    """
    for name in ("DOCSTORE_BASE_PATH", "DOCSTORE_JSON_INDENT", "DOCSTORE_LOCK_WRITES", "DOCSTORE_DEBUG_LOG_IO"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_path(tmp_path: Path) -> str:
    """
    A string base path ending in a separator, so database files land inside tmp_path.
    """
    return f"{tmp_path}/"
