from __future__ import annotations

import contextlib
import os
from pathlib import Path

from .errors import IOFailure
from .interfaces import RawFileAdapter
from .locks import GLOBAL_PATH_LOCKS, exclusive_file_lock
from .paths import ensure_dir


class LockingFileAdapter(RawFileAdapter):
    """
    Reads and writes whole database files.

    - `read` returns None for a missing file and never blocks on writers.
    - `write` replaces the content in place while holding an exclusive flock,
      so concurrent writers from other processes never interleave bytes.
    """

    def __init__(self, *, lock_writes: bool = True):
        self._lock_writes = lock_writes

    def read(self, path: Path) -> bytes | None:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise IOFailure(exc.errno, f"Cannot read {path}: {exc.strerror or exc}") from exc

    def write(self, path: Path, data: bytes) -> None:
        try:
            ensure_dir(path.parent)
            # O_TRUNC would empty the file before the lock is held.
            fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
        except OSError as exc:
            raise IOFailure(exc.errno, f"Cannot open {path}: {exc.strerror or exc}") from exc

        try:
            with GLOBAL_PATH_LOCKS.lock_for(path):
                lock = exclusive_file_lock(fd) if self._lock_writes else contextlib.nullcontext()
                with lock:
                    os.ftruncate(fd, 0)
                    view = memoryview(data)
                    while view:
                        written = os.write(fd, view)
                        view = view[written:]
                    os.fsync(fd)
        except OSError as exc:
            raise IOFailure(exc.errno, f"Cannot write {path}: {exc.strerror or exc}") from exc
        finally:
            os.close(fd)
