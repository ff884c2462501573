"""
Docstore errors.

Every failure raised by the store derives from DocStoreError.
"""

from __future__ import annotations


class DocStoreError(Exception):
    """Base class for docstore failures."""


class WrongDatabase(DocStoreError):
    """Raised when a database file belongs to another logical database."""

    def __init__(self, expected: str, found: str):
        super().__init__(f"Wrong db: expected identity {expected!r}, file has {found!r}")
        self.expected = expected
        self.found = found


class CorruptDatabase(DocStoreError):
    """Raised when a database file cannot be parsed into the persisted shape."""


class MissingRecord(DocStoreError, KeyError):
    """Raised when a record id is not present."""

    def __init__(self, record_id: int):
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"No record with id {self.record_id}"


class InvalidRecord(DocStoreError, TypeError):
    """Raised when a value is not a string-keyed mapping of JSON-like values."""


class IOFailure(DocStoreError, OSError):
    """Raised when reading or writing a database file fails."""
