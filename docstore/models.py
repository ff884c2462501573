from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, JsonValue, TypeAdapter, ValidationError, field_validator, model_validator

from .errors import CorruptDatabase, InvalidRecord

ID_FIELD = "__ID__"

Record = dict[str, JsonValue]

_RECORD_ADAPTER: TypeAdapter[Record] = TypeAdapter(
    Record, config=ConfigDict(strict=True, allow_inf_nan=False)
)


class DatabaseDocument(BaseModel):
    """
    Mirrors the on-disk database file exactly:
      {
        "dbHash": "<hex identity tag>",
        "items": { "<id>": { ..., "__ID__": <id> } },
        "itemsCounter": <int>
      }
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    dbHash: str
    items: dict[str, Record]
    itemsCounter: int

    @field_validator("items", mode="before")
    @classmethod
    def _empty_list_is_empty_table(cls, value: Any) -> Any:
        # PHP's json_encode writes an empty table as [].
        if isinstance(value, list) and not value:
            return {}
        return value

    @model_validator(mode="after")
    def _check_ids(self) -> "DatabaseDocument":
        if self.itemsCounter < 0:
            raise ValueError("itemsCounter must not be negative")
        for key, record in self.items.items():
            if not key.isdecimal() or str(int(key)) != key:
                raise ValueError(f"item key {key!r} is not a decimal id")
            record_id = record.get(ID_FIELD)
            if type(record_id) is not int or record_id != int(key):
                raise ValueError(f"item {key} carries {ID_FIELD}={record_id!r}")
            if record_id > self.itemsCounter:
                raise ValueError(f"item {key} is above itemsCounter={self.itemsCounter}")
        return self

    @classmethod
    def from_disk_bytes(cls, content: bytes) -> "DatabaseDocument":
        try:
            return cls.model_validate_json(content)
        except ValidationError as exc:
            raise CorruptDatabase(f"Unreadable database file: {exc}") from exc

    @classmethod
    def from_state(cls, db_hash: str, items: Mapping[int, Record], counter: int) -> "DatabaseDocument":
        # Records are validated on the way in; skip re-validating the whole table.
        return cls.model_construct(
            dbHash=db_hash,
            items={str(k): v for k, v in items.items()},
            itemsCounter=counter,
        )

    def to_disk_bytes(self, indent: int | None = None) -> bytes:
        return self.model_dump_json(indent=indent).encode("utf-8")

    def records_by_id(self) -> dict[int, Record]:
        return {int(k): v for k, v in self.items.items()}


def validate_record(value: Any) -> Record:
    """
    Check `value` is a string-keyed mapping of JSON-like values and return an
    independent copy of it.
    """
    if not isinstance(value, Mapping):
        raise InvalidRecord(f"Records must be string-keyed mappings, got {type(value).__name__}")
    try:
        return _RECORD_ADAPTER.validate_python(dict(value))
    except ValidationError as exc:
        raise InvalidRecord(f"Record is not JSON-like: {exc}") from exc
