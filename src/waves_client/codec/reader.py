"""
Binary Reader

Mirror of BinaryWriter. Used to inspect bodies and to check that what was
written decodes back to the same fields.
"""

import builtins
import struct
from typing import Optional

from ..runtime.errors import DecodingError, ErrorCode
from .base58 import b58encode
from .writer import ALIAS_VERSION, ASSET_ID_LENGTH

ADDRESS_LENGTH = 26


class BinaryReader:
    """Sequential reader over a body buffer."""

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = buf
        self._off = 0

    @property
    def eof(self) -> bool:
        """True when every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def offset(self) -> int:
        return self._off

    def _take(self, n: int) -> builtins.bytes:
        if n < 0 or self._off + n > len(self._buf):
            raise DecodingError(
                f"Buffer overflow: attempting to read {n} bytes at offset {self._off}",
                ErrorCode.INVALID_BINARY,
            )
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._take(1)[0]

    def bool(self) -> builtins.bool:
        """Read a 0/1 byte as a boolean."""
        return self.u8() != 0

    def short(self) -> int:
        """Read a 16-bit big-endian length or count."""
        return struct.unpack(">h", self._take(2))[0]

    def int32(self) -> int:
        """Read a signed 32-bit big-endian integer."""
        return struct.unpack(">i", self._take(4))[0]

    def long(self) -> int:
        """Read a signed 64-bit big-endian integer."""
        return struct.unpack(">q", self._take(8))[0]

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        return builtins.bytes(self._take(n))

    def len_prefixed_bytes(self) -> builtins.bytes:
        """Read bytes with a 16-bit length prefix."""
        n = self.short()
        if n < 0:
            raise DecodingError(f"Negative length prefix: {n}", ErrorCode.INVALID_BINARY)
        return self.bytes(n)

    def string_ascii(self) -> str:
        """Read a length-prefixed single-byte string."""
        try:
            return self.len_prefixed_bytes().decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodingError("String is not ASCII", ErrorCode.INVALID_BINARY, cause=e)

    def string_utf8(self) -> str:
        """Read length-prefixed UTF-8 text."""
        try:
            return self.len_prefixed_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError("String is not valid UTF-8", ErrorCode.INVALID_BINARY, cause=e)

    def asset_id(self) -> str:
        """Read a mandatory 32-byte asset identifier as base58 text."""
        return b58encode(self.bytes(ASSET_ID_LENGTH))

    def optional_asset(self) -> Optional[str]:
        """Read a presence-coded asset identifier; ``None`` means native asset."""
        flag = self.u8()
        if flag == 0:
            return None
        if flag != 1:
            raise DecodingError(f"Invalid asset presence flag: {flag}", ErrorCode.INVALID_BINARY)
        return self.asset_id()

    def recipient(self) -> str:
        """
        Read a recipient: an alias when the leading byte is the alias version,
        otherwise a fixed-length address returned as base58 text.
        """
        if self._off < len(self._buf) and self._buf[self._off] == ALIAS_VERSION:
            self.u8()
            chain = chr(self.u8())
            return f"alias:{chain}:{self.string_ascii()}"
        return b58encode(self.bytes(ADDRESS_LENGTH))

    def remaining(self) -> builtins.bytes:
        """Read everything left in the buffer."""
        return self.bytes(len(self._buf) - self._off)
