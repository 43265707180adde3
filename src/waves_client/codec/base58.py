"""
Identifier text codec.

Asset ids, public keys, signatures, addresses and attachments travel as
base58 text in JSON. This module wraps the ``base58`` package so that bad
input surfaces as a DecodingError instead of a bare ValueError.
"""

from typing import Optional

import base58

from ..runtime.errors import DecodingError, ErrorCode


def b58encode(data: bytes) -> str:
    """Encode raw bytes as base58 text."""
    return base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    """
    Decode base58 text into raw bytes.

    Args:
        text: Base58 encoded identifier

    Returns:
        Decoded bytes

    Raises:
        DecodingError: If text is not a string or contains characters
            outside the base58 alphabet
    """
    if not isinstance(text, str):
        raise DecodingError(
            f"Expected base58 text, got {type(text).__name__}",
            ErrorCode.INVALID_IDENTIFIER,
        )
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise DecodingError(
            f"Invalid base58 identifier {text!r}",
            ErrorCode.INVALID_IDENTIFIER,
            cause=e,
        )


def b58decode_optional(text: Optional[str]) -> Optional[bytes]:
    """Decode text, mapping ``None`` and the empty string to ``None``."""
    if not text:
        return None
    return b58decode(text)
