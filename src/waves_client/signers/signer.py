"""
Signer interface and the stateless signing functions.

A signer owns one key pair and signs raw body bytes. The codec never stores
private keys; it borrows a signer for the duration of ``Transaction.sign``.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Union

from ..crypto.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from ..codec.base58 import b58encode

logger = logging.getLogger(__name__)


class Signer(ABC):
    """
    Base signer interface.

    Implementations use a 32-byte public key and produce 64-byte signatures
    over the full body, not over a digest of it.
    """

    @property
    @abstractmethod
    def public_key(self) -> bytes:
        """Raw 32-byte public key written into transaction bodies."""
        pass

    @abstractmethod
    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Args:
            message: Body bytes to sign

        Returns:
            64-byte signature
        """
        pass

    @abstractmethod
    def verify(self, signature: bytes, message: bytes) -> bool:
        """Verify a signature produced over ``message``."""
        pass

    @property
    def public_key_base58(self) -> str:
        return b58encode(self.public_key)


class Ed25519Signer(Signer):
    """Ed25519 signer over a single private key."""

    def __init__(self, private_key: Union[bytes, Ed25519PrivateKey]):
        """
        Initialize Ed25519 signer.

        Args:
            private_key: 32-byte seed or Ed25519PrivateKey object

        Raises:
            ValueError: If private key has the wrong type
        """
        if isinstance(private_key, (bytes, bytearray)):
            self._private_key = Ed25519PrivateKey(bytes(private_key))
        elif isinstance(private_key, Ed25519PrivateKey):
            self._private_key = private_key
        else:
            raise ValueError(f"Invalid private key type: {type(private_key)}")

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> Ed25519Signer:
        """Deterministic signer for tests and fixtures."""
        return cls(Ed25519PrivateKey.from_seed(seed))

    @property
    def public_key(self) -> bytes:
        return self._private_key.public_key().to_bytes()

    def sign(self, message: bytes) -> bytes:
        logger.debug(f"Signing {len(message)} bytes with key {self.public_key_base58}")
        return self._private_key.sign(message)

    def verify(self, signature: bytes, message: bytes) -> bool:
        return self._private_key.public_key().verify(signature, message)


def sign_message(private_key: bytes, message: bytes) -> bytes:
    """
    Sign ``message`` with a raw 32-byte private key.

    Stateless: nothing about the key outlives the call.
    """
    return Ed25519PrivateKey(private_key).sign(message)


def verify_signature(public_key: bytes, signature: bytes, message: bytes) -> bool:
    """Check a 64-byte signature against a raw 32-byte public key."""
    return Ed25519PublicKey(public_key).verify(signature, message)
