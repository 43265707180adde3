"""
Curve25519 (XEdDSA) signer, the scheme Waves nodes verify.

Backed by the ``python-axolotl-curve25519`` package, installed with the
``curve25519`` extra: pip install waves-client[curve25519]

Signatures are randomized: signing the same body twice gives different
signatures that both verify.
"""

from __future__ import annotations
import hashlib
import logging
import os
from typing import Union

from ..crypto.ed25519 import PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH, SIGNATURE_LENGTH
from ..runtime.errors import ErrorCode, SigningError
from .signer import Signer

HAS_CURVE25519 = False

try:
    import axolotl_curve25519 as curve
    HAS_CURVE25519 = True
except ImportError:
    pass

logger = logging.getLogger(__name__)


class Curve25519Error(SigningError):
    """Missing backend or invalid Curve25519 key material."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message, ErrorCode.INTERNAL, cause=cause)


class Curve25519Signer(Signer):
    """
    Waves-compatible signer over a single Curve25519 private key.

    Requires the ``python-axolotl-curve25519`` package.
    """

    def __init__(self, private_key: bytes):
        """
        Initialize Curve25519 signer.

        Args:
            private_key: 32 bytes; clamped to a valid scalar

        Raises:
            Curve25519Error: If the backend is missing or the key has the wrong length
        """
        if not HAS_CURVE25519:
            raise Curve25519Error("No Curve25519 implementation available (install python-axolotl-curve25519)")
        if not isinstance(private_key, (bytes, bytearray)) or len(private_key) != PRIVATE_KEY_LENGTH:
            raise Curve25519Error(f"Curve25519 private key must be {PRIVATE_KEY_LENGTH} bytes")
        self._private_key = curve.generatePrivateKey(bytes(private_key))
        self._public_key = curve.generatePublicKey(self._private_key)

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> Curve25519Signer:
        """Signer keyed by the SHA-256 of ``seed``, for tests and fixtures."""
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        return cls(hashlib.sha256(seed).digest())

    @property
    def public_key(self) -> bytes:
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        logger.debug(f"Signing {len(message)} bytes with key {self.public_key_base58}")
        return curve.calculateSignature(os.urandom(64), self._private_key, message)

    def verify(self, signature: bytes, message: bytes) -> bool:
        return verify_curve25519(self._public_key, signature, message)


def verify_curve25519(public_key: bytes, signature: bytes, message: bytes) -> bool:
    """Check a 64-byte Curve25519 signature against a raw 32-byte public key."""
    if not HAS_CURVE25519:
        raise Curve25519Error("No Curve25519 implementation available (install python-axolotl-curve25519)")
    if len(public_key) != PUBLIC_KEY_LENGTH or len(signature) != SIGNATURE_LENGTH:
        return False
    return curve.verifySignature(public_key, message, signature) == 0
