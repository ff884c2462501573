from __future__ import annotations

from pathlib import Path
from typing import Protocol


class RawFileAdapter(Protocol):
    """
    Whole-file byte access for one database file at a time.
    """

    def read(self, path: Path) -> bytes | None:
        """Return the full content, or None when the file does not exist."""
        ...

    def write(self, path: Path, data: bytes) -> None:
        """Replace the full content under an exclusive lock held for this call only."""
        ...
