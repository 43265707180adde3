"""Key material used by the signers."""

from .ed25519 import (
    Ed25519Error, Ed25519PrivateKey, Ed25519PublicKey,
    PUBLIC_KEY_LENGTH, PRIVATE_KEY_LENGTH, SIGNATURE_LENGTH,
)

__all__ = [
    "Ed25519Error",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "PUBLIC_KEY_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "SIGNATURE_LENGTH",
]
