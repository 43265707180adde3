"""
Waves Binary Codec Module

Fixed-width big-endian primitives for transaction bodies and the base58 text
codec used for identifiers.

Key components:
- writer.py: BinaryWriter (u8, short, long, length-prefixed fields, presence-coded assets)
- reader.py: BinaryReader, the mirror of BinaryWriter
- base58.py: identifier text encoding
"""

from .base58 import b58decode, b58decode_optional, b58encode
from .reader import BinaryReader
from .writer import ASSET_ID_LENGTH, MAX_SHORT, BinaryWriter, check_length

__all__ = [
    "ASSET_ID_LENGTH",
    "MAX_SHORT",
    "BinaryReader",
    "BinaryWriter",
    "b58decode",
    "b58decode_optional",
    "b58encode",
    "check_length",
]
