"""
JSON field conversions.

Readers for the node's JSON dictionaries: required-field lookup, epoch
millisecond dates, base58 identifiers and proof arrays. Every failure is a
DecodingError naming the offending field.
"""

from __future__ import annotations
import base64
import binascii
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union

from ..codec.base58 import b58decode, b58encode
from ..runtime.errors import DecodingError, ErrorCode
from .proofs import MAX_PROOFS, Proofs

BASE64_PREFIX = "base64:"

_MISSING = object()
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def now_utc() -> datetime:
    """Current UTC time truncated to the millisecond the wire format keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_millis(value: datetime) -> int:
    """Epoch milliseconds of an aware (or UTC-naive) datetime."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // _ONE_MS


def from_millis(ms: int) -> datetime:
    """UTC datetime for an epoch millisecond value."""
    return _EPOCH + ms * _ONE_MS


def coerce_timestamp(value: Union[datetime, int, None]) -> datetime:
    """Accept a datetime or epoch milliseconds; ``None`` means now."""
    if value is None:
        return now_utc()
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, int) and not isinstance(value, bool):
        return from_millis(value)
    raise TypeError(f"timestamp must be datetime or epoch milliseconds, got {type(value).__name__}")


def require(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise DecodingError(f"Missing required field '{key}'", ErrorCode.MISSING_FIELD,
                            details={"field": key})
    return value


def get_int(data: Mapping[str, Any], key: str, default: Any = _MISSING) -> Optional[int]:
    """Read an integer field. Numeric strings are accepted, booleans are not."""
    if default is not _MISSING and data.get(key) is None:
        return default
    value = require(data, key)
    if isinstance(value, bool):
        raise DecodingError(f"Field '{key}' must be an integer", ErrorCode.INVALID_FIELD,
                            details={"field": key})
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise DecodingError(f"Field '{key}' must be an integer", ErrorCode.INVALID_FIELD,
                                details={"field": key}, cause=e)
    raise DecodingError(f"Field '{key}' must be an integer", ErrorCode.INVALID_FIELD,
                        details={"field": key})


def get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = require(data, key)
    if not isinstance(value, bool):
        raise DecodingError(f"Field '{key}' must be a boolean", ErrorCode.INVALID_FIELD,
                            details={"field": key})
    return value


def get_str(data: Mapping[str, Any], key: str) -> str:
    value = require(data, key)
    if not isinstance(value, str):
        raise DecodingError(f"Field '{key}' must be a string", ErrorCode.INVALID_FIELD,
                            details={"field": key})
    return value


def get_optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    """Absent, ``null`` and empty string all read as ``None``."""
    value = data.get(key)
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise DecodingError(f"Field '{key}' must be a string", ErrorCode.INVALID_FIELD,
                            details={"field": key})
    return value


def get_date(data: Mapping[str, Any], key: str = "timestamp") -> datetime:
    return from_millis(get_int(data, key))


def get_base58(data: Mapping[str, Any], key: str) -> bytes:
    return b58decode(get_str(data, key))


def decode_binary(text: str) -> bytes:
    """Decode ``base64:``-prefixed text, or plain base58."""
    if text.startswith(BASE64_PREFIX):
        try:
            return base64.b64decode(text[len(BASE64_PREFIX):], validate=True)
        except binascii.Error as e:
            raise DecodingError("Invalid base64 value", ErrorCode.INVALID_IDENTIFIER, cause=e)
    return b58decode(text)


def encode_base64(data: bytes) -> str:
    return BASE64_PREFIX + base64.b64encode(data).decode("ascii")


def get_proofs(data: Mapping[str, Any]) -> Proofs:
    """
    Read the ``proofs`` array, or the legacy ``signature`` field as slot 0.

    Empty strings and ``null`` in the array are empty slots.
    """
    raw = data.get("proofs")
    if raw is not None:
        if not isinstance(raw, (list, tuple)):
            raise DecodingError("Field 'proofs' must be an array", ErrorCode.INVALID_FIELD,
                                details={"field": "proofs"})
        if len(raw) > MAX_PROOFS:
            raise DecodingError(f"At most {MAX_PROOFS} proofs are allowed, got {len(raw)}",
                                ErrorCode.INVALID_FIELD, details={"field": "proofs"})
        return Proofs(b58decode(p) if p else None for p in raw)
    signature = get_optional_str(data, "signature")
    return Proofs([b58decode(signature)] if signature else None)


def render_header(type_id: Optional[int], sender_public_key: bytes,
                sender: Optional[str] = None, version: Optional[int] = None) -> Dict[str, Any]:
    """Leading JSON keys shared by every transaction."""
    out: Dict[str, Any] = {}
    if type_id is not None:
        out["type"] = type_id
    if version is not None:
        out["version"] = version
    out["senderPublicKey"] = b58encode(sender_public_key)
    if sender is not None:
        out["sender"] = sender
    return out


def read_chain_id(data: Mapping[str, Any], key: str = "chainId") -> Optional[str]:
    """Chain id given either as its byte value or as a one-character string."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and 0 < value < 0x80:
        return chr(value)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise DecodingError(f"Invalid chain id {value!r}", ErrorCode.INVALID_FIELD, details={"field": key})


def address_chain_id(address: Optional[str]) -> Optional[str]:
    """Chain id stored in the second byte of a base58 address."""
    if not address:
        return None
    raw = b58decode(address)
    if len(raw) < 2 or raw[1] >= 0x80:
        raise DecodingError(f"Invalid address {address!r}", ErrorCode.INVALID_FIELD,
                            details={"field": "sender"})
    return chr(raw[1])
