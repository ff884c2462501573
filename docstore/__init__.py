from __future__ import annotations

from .errors import CorruptDatabase, DocStoreError, InvalidRecord, IOFailure, MissingRecord, WrongDatabase
from .file_io import LockingFileAdapter
from .interfaces import RawFileAdapter
from .matcher import matches, resolve_path, strict_equal
from .models import ID_FIELD, DatabaseDocument, Record
from .paths import db_file_name, db_file_path, identity_tag
from .settings import Settings, get_settings
from .store import Store

__all__ = [
    "Store",
    "Settings",
    "get_settings",
    "RawFileAdapter",
    "LockingFileAdapter",
    "DatabaseDocument",
    "Record",
    "ID_FIELD",
    "identity_tag",
    "db_file_name",
    "db_file_path",
    "matches",
    "resolve_path",
    "strict_equal",
    "DocStoreError",
    "WrongDatabase",
    "CorruptDatabase",
    "MissingRecord",
    "InvalidRecord",
    "IOFailure",
]
