"""
Single-file JSON document store.

A :class:`Store` opens one logical database, kept in ``<base_path><md5(name)>.json``.
All records live in memory; nothing is written until :meth:`Store.save` is called,
and each save replaces the whole file.

.. code-block:: python

    store = Store("./data/", "people")
    store.insert({"name": "x", "address": {"city": "Skopje"}})
    store.find({"address.city": "Skopje"})
    store.save()
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import CorruptDatabase, IOFailure, MissingRecord, WrongDatabase
from .file_io import LockingFileAdapter
from .interfaces import RawFileAdapter
from .matcher import find as find_matching
from .models import ID_FIELD, DatabaseDocument, Record, validate_record
from .paths import db_file_path, identity_tag
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _normalize_id(record_id: Any) -> int | None:
    if isinstance(record_id, bool):
        return None
    if isinstance(record_id, int):
        return record_id
    if isinstance(record_id, str) and record_id.isdecimal() and str(int(record_id)) == record_id:
        return int(record_id)
    return None


class Store:
    """
    In-memory record table backed by one JSON file.

    Not thread-safe: callers sharing an instance across threads must serialize
    access themselves.
    """

    def __init__(
        self,
        base_path: str | Path,
        database: str,
        *,
        adapter: RawFileAdapter | None = None,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings(env_file=None)
        self._database = database
        self._identity_tag = identity_tag(database)
        self._path = db_file_path(base_path, database)
        self._adapter = adapter or LockingFileAdapter(lock_writes=self._settings.lock_writes)

        self._items: dict[int, Record] = {}
        self._counter = 0

        self.load()

    @classmethod
    def open(cls, database: str, settings: Settings | None = None, **kwargs: Any) -> "Store":
        """Open `database` under the configured base path."""
        settings = settings or get_settings()
        return cls(settings.base_path, database, settings=settings, **kwargs)

    @property
    def database(self) -> str:
        return self._database

    @property
    def identity_tag(self) -> str:
        return self._identity_tag

    @property
    def path(self) -> Path:
        return self._path

    @property
    def counter(self) -> int:
        """Last id handed out; ids are never reused."""
        return self._counter

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self) -> None:
        """
        (Re)read the database file, replacing the in-memory state.

        A missing file is initialized with an empty table and read back, so the
        live state always comes from persisted bytes.
        """
        content = self._adapter.read(self._path)
        if content is None:
            logger.info("Initializing database %r at %s", self._database, self._path)
            self._items = {}
            self._counter = 0
            self.save()
            content = self._adapter.read(self._path)
            if content is None:
                raise IOFailure(None, f"{self._path} is missing right after initialization")

        if self._settings.debug_log_io:
            logger.debug("Loaded %d bytes from %s", len(content), self._path)

        try:
            doc = DatabaseDocument.from_disk_bytes(content)
        except CorruptDatabase:
            logger.warning("Database file %s is corrupt", self._path)
            raise

        if doc.dbHash != self._identity_tag:
            logger.warning("Database file %s does not belong to %r", self._path, self._database)
            raise WrongDatabase(self._identity_tag, doc.dbHash)

        self._items = doc.records_by_id()
        self._counter = doc.itemsCounter

    def save(self) -> None:
        """Write the full in-memory state over the database file."""
        doc = DatabaseDocument.from_state(self._identity_tag, self._items, self._counter)
        data = doc.to_disk_bytes(indent=self._settings.json_indent)
        self._adapter.write(self._path, data)
        if self._settings.debug_log_io:
            logger.debug("Saved %d bytes to %s", len(data), self._path)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------
    def exists(self, record_id: int | str) -> bool:
        return _normalize_id(record_id) in self._items

    def get(self, record_id: int | str) -> Record:
        """Return a copy of the record, or raise :class:`MissingRecord`."""
        key = _normalize_id(record_id)
        if key not in self._items:
            raise MissingRecord(record_id)
        return copy.deepcopy(self._items[key])

    def delete(self, record_id: int | str) -> None:
        key = _normalize_id(record_id)
        self._items.pop(key, None)

    def update(self, record_id: int | str, value: Mapping[str, Any]) -> bool:
        """Replace a record wholesale; returns False if the id is unknown."""
        key = _normalize_id(record_id)
        if key not in self._items:
            return False
        record = validate_record(value)
        record[ID_FIELD] = key
        self._items[key] = record
        return True

    def insert(self, value: Mapping[str, Any]) -> bool:
        """
        Append a record under the next id.

        Any caller-supplied ``__ID__`` is discarded; the assigned id can be read
        back from :attr:`counter`.
        """
        record = validate_record(value)
        record.pop(ID_FIELD, None)

        new_id = self._counter + 1
        if new_id in self._items:
            logger.warning("Id %d is already taken in %r; insert aborted", new_id, self._database)
            return False

        self._counter = new_id
        record[ID_FIELD] = new_id
        self._items[new_id] = record
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find(self, criteria: Mapping[str, Any] | None = None, limit: int = 0) -> list[Record]:
        """
        Records matching every criterion, in insertion order.

        Nested values are reached with dotted paths:
        ``{"field.inner": 1}`` matches ``{"field": {"inner": 1}}``.
        """
        found = find_matching(self._items.values(), criteria or {}, limit)
        return [copy.deepcopy(record) for record in found]

    def find_one(self, criteria: Mapping[str, Any] | None = None) -> Record | None:
        found = self.find(criteria, limit=1)
        return found[0] if found else None
