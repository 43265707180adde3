"""
Binary Writer

Big-endian primitive encoding for transaction bodies. Every length prefix is
a signed 16-bit short, every number a signed 64-bit long. Range checks run
before anything is appended, so a failed write leaves no half-written field.
"""

from __future__ import annotations
import struct
from typing import List, Optional

from ..runtime.errors import EncodingError, ErrorCode
from .base58 import b58decode

MAX_SHORT = 0x7FFF
MIN_LONG = -(1 << 63)
MAX_LONG = (1 << 63) - 1
ASSET_ID_LENGTH = 32
ALIAS_PREFIX = "alias:"
ALIAS_VERSION = 0x02


def check_length(length: int, field: str = "field") -> None:
    """
    Ensure a length fits in a 16-bit prefix.

    Raises:
        EncodingError: If length exceeds 32767
    """
    if length < 0 or length > MAX_SHORT:
        raise EncodingError(
            f"{field} too long: {length} bytes (max {MAX_SHORT})",
            ErrorCode.FIELD_TOO_LONG,
            details={"field": field, "length": length},
        )


class BinaryWriter:
    """
    Growable byte buffer with the ledger's fixed-width encodings.

    All write methods return None; call ``to_bytes`` once the body is
    complete.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        if not 0 <= v <= 0xFF:
            raise EncodingError(f"Byte value out of range: {v}", ErrorCode.INVALID_FIELD)
        self._bb.append(v)

    def bool(self, v: bool) -> None:
        """Write a boolean as a single 0/1 byte."""
        self.u8(1 if v else 0)

    def short(self, v: int, field: str = "length") -> None:
        """
        Write a 16-bit big-endian length or count.

        Args:
            v: Value in 0..32767
            field: Field name used in the error message
        """
        check_length(v, field)
        self._bb.extend(struct.pack(">h", v))

    def long(self, v: int, field: str = "value") -> None:
        """
        Write a signed 64-bit big-endian integer.

        Args:
            v: Integer value (amounts, fees, timestamps)
            field: Field name used in the error message
        """
        if isinstance(v, bool) or not isinstance(v, int):
            raise EncodingError(
                f"{field} must be an integer, got {type(v).__name__}",
                ErrorCode.INVALID_FIELD,
            )
        if not MIN_LONG <= v <= MAX_LONG:
            raise EncodingError(f"{field} out of 64-bit range: {v}", ErrorCode.INVALID_FIELD)
        self._bb.extend(struct.pack(">q", v))

    def int32(self, v: int, field: str = "length") -> None:
        """Write a signed 32-bit big-endian length."""
        if not 0 <= v <= 0x7FFFFFFF:
            raise EncodingError(f"{field} out of 32-bit range: {v}", ErrorCode.INVALID_FIELD)
        self._bb.extend(struct.pack(">i", v))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def fixed_bytes(self, v: bytes, size: int, field: str = "field") -> None:
        """Write raw bytes that must be exactly ``size`` long."""
        if len(v) != size:
            raise EncodingError(
                f"{field} must be {size} bytes, got {len(v)}",
                ErrorCode.INVALID_FIELD,
                details={"field": field, "length": len(v)},
            )
        self.bytes(v)

    def len_prefixed_bytes(self, v: bytes, field: str = "field") -> None:
        """
        Write bytes with a 16-bit length prefix.

        Args:
            v: Bytes to write with length prefix
            field: Field name used in the error message
        """
        self.short(len(v), field)
        self.bytes(v)

    def string_ascii(self, s: str, field: str = "field") -> None:
        """
        Write a single-byte-per-character string with length prefix.

        Used for names and aliases.
        """
        try:
            b = s.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingError(f"{field} must be ASCII", ErrorCode.INVALID_FIELD, cause=e)
        self.len_prefixed_bytes(b, field)

    def string_utf8(self, s: str, field: str = "field") -> None:
        """
        Write free-form text as UTF-8 with length prefix.

        The prefix is the encoded byte length, not the character count.
        """
        self.len_prefixed_bytes(s.encode("utf-8"), field)

    def asset_id(self, asset_id: str, field: str = "assetId") -> None:
        """Write a mandatory 32-byte asset identifier from its base58 text."""
        self.fixed_bytes(b58decode(asset_id), ASSET_ID_LENGTH, field)

    def optional_asset(self, asset_id: Optional[str], field: str = "assetId") -> None:
        """
        Write a presence-coded asset identifier.

        ``0x00`` for the native asset, otherwise ``0x01`` followed by the
        32 decoded bytes.
        """
        if not asset_id:
            self.u8(0)
            return
        decoded = b58decode(asset_id)
        if len(decoded) != ASSET_ID_LENGTH:
            raise EncodingError(
                f"{field} must be {ASSET_ID_LENGTH} bytes, got {len(decoded)}",
                ErrorCode.INVALID_FIELD,
                details={"field": field, "length": len(decoded)},
            )
        self.u8(1)
        self.bytes(decoded)

    def alias(self, alias: str, chain_byte: int, field: str = "alias") -> None:
        """
        Write an alias address: version byte, chain id, length-prefixed ASCII name.
        """
        try:
            encoded = alias.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingError(f"{field} must be ASCII", ErrorCode.INVALID_FIELD, cause=e)
        check_length(len(encoded), field)
        self.u8(ALIAS_VERSION)
        self.u8(chain_byte)
        self.len_prefixed_bytes(encoded, field)

    def recipient(self, recipient: str, field: str = "recipient") -> None:
        """
        Write a recipient: ``alias:<chain>:<name>`` text is written as an alias,
        anything else is a base58 address copied as raw bytes.
        """
        if recipient.startswith(ALIAS_PREFIX):
            parts = recipient.split(":", 2)
            if len(parts) != 3 or len(parts[1]) != 1:
                raise EncodingError(f"Malformed alias recipient {recipient!r}", ErrorCode.INVALID_FIELD)
            self.alias(parts[2], ord(parts[1]), field)
        else:
            self.bytes(b58decode(recipient))

    def __len__(self) -> int:
        return len(self._bb)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
