"""
Data transaction: store typed key/value entries on the sender's account.

Entries are signed in the order given, so they must arrive as an ordered
sequence. A mapping is rejected outright rather than trusting its iteration
order.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictBytes, StrictInt, field_validator, model_validator

from ..codec.base58 import b58encode
from ..codec.writer import BinaryWriter
from ..enums import DataEntryType, TransactionType
from ..runtime.errors import DecodingError, EncodingError, ErrorCode
from .base import Transaction
from .fields import decode_binary, get_int, get_str, require

ALLOWED_ENTRY_TYPES = ", ".join(t.json_name for t in DataEntryType)


class DataEntry(BaseModel):
    """One key with an integer, boolean or binary value."""

    model_config = ConfigDict(frozen=True)

    key: str
    type: DataEntryType
    value: Union[StrictBool, StrictInt, StrictBytes]

    @model_validator(mode="after")
    def _check_value_type(self) -> DataEntry:
        expected = {
            DataEntryType.INTEGER: int,
            DataEntryType.BOOLEAN: bool,
            DataEntryType.BINARY: bytes,
        }[self.type]
        if not isinstance(self.value, expected) or (expected is int and isinstance(self.value, bool)):
            raise ValueError(f"value of {self.key!r} does not match type {self.type.json_name}")
        return self

    @classmethod
    def of(cls, key: str, value: Any) -> DataEntry:
        """
        Build an entry, inferring the type tag from the Python value.

        Raises:
            EncodingError: For values that are not int, bool or bytes
        """
        if isinstance(value, bool):
            return cls(key=key, type=DataEntryType.BOOLEAN, value=value)
        if isinstance(value, int):
            return cls(key=key, type=DataEntryType.INTEGER, value=value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(key=key, type=DataEntryType.BINARY, value=bytes(value))
        raise EncodingError(
            f"Unsupported entry type {type(value).__name__} for key {key!r}; "
            f"allowed: {ALLOWED_ENTRY_TYPES}",
            ErrorCode.UNSUPPORTED_ENTRY_TYPE,
            details={"key": key, "allowed": [t.json_name for t in DataEntryType]},
        )

    def write(self, writer: BinaryWriter) -> None:
        writer.string_utf8(self.key, "key")
        writer.u8(self.type.value)
        if self.type is DataEntryType.INTEGER:
            writer.long(self.value, self.key)
        elif self.type is DataEntryType.BOOLEAN:
            writer.bool(self.value)
        else:
            writer.len_prefixed_bytes(self.value, self.key)

    def to_json(self) -> Dict[str, Any]:
        value = b58encode(self.value) if self.type is DataEntryType.BINARY else self.value
        return {"key": self.key, "type": self.type.json_name, "value": value}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DataEntry:
        if not isinstance(data, Mapping):
            raise DecodingError("Data entry must be an object", ErrorCode.INVALID_FIELD)
        key = get_str(data, "key")
        type_name = get_str(data, "type")
        try:
            entry_type = DataEntryType.from_json_name(type_name)
        except KeyError as e:
            raise DecodingError(
                f"Unsupported entry type {type_name!r}; allowed: {ALLOWED_ENTRY_TYPES}",
                ErrorCode.INVALID_FIELD, details={"key": key}, cause=e,
            )
        value = require(data, "value")
        if entry_type is DataEntryType.BINARY:
            value = decode_binary(get_str(data, "value"))
        elif entry_type is DataEntryType.INTEGER:
            value = get_int(data, "value")
        elif not isinstance(value, bool):
            raise DecodingError(f"Value of {key!r} must be a boolean", ErrorCode.INVALID_FIELD)
        return cls(key=key, type=entry_type, value=value)


def coerce_entries(entries: Any) -> List[DataEntry]:
    """
    Normalize entries to a list of DataEntry.

    Accepts DataEntry objects and ``(key, value)`` pairs.

    Raises:
        EncodingError: If ``entries`` is a mapping or an unordered collection
    """
    if isinstance(entries, Mapping) or isinstance(entries, (set, frozenset)):
        raise EncodingError(
            "Data entries must be an ordered sequence of (key, value) pairs, not "
            f"{type(entries).__name__}",
            ErrorCode.INVALID_FIELD,
        )
    result = []
    for item in entries:
        if isinstance(item, DataEntry):
            result.append(item)
        else:
            key, value = item
            result.append(DataEntry.of(key, value))
    return result


class DataTransaction(Transaction):
    """Write ``entries`` to the sender's data storage."""

    TYPE = TransactionType.DATA
    VERSION = 1
    SUPPORTS_PROOFS = True

    entries: List[DataEntry]

    @field_validator("entries", mode="before")
    @classmethod
    def _coerce_entries(cls, v: Any) -> List[DataEntry]:
        return coerce_entries(v)

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.short(len(self.entries), "data")
        for entry in self.entries:
            entry.write(writer)
        writer.long(self.timestamp_ms, "timestamp")
        writer.long(self.fee, "fee")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out["data"] = [e.to_json() for e in self.entries]
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DataTransaction:
        raw = require(data, "data")
        if not isinstance(raw, list):
            raise DecodingError("Field 'data' must be an array", ErrorCode.INVALID_FIELD,
                                details={"field": "data"})
        return cls._build(
            **cls.header_from_json(data),
            entries=[DataEntry.from_json(e) for e in raw],
            fee=get_int(data, "fee"),
        )
