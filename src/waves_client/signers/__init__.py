"""Signers for transaction and order bodies."""

from .signer import Signer, Ed25519Signer, sign_message, verify_signature
from .curve25519 import HAS_CURVE25519, Curve25519Error, Curve25519Signer, verify_curve25519

__all__ = [
    "Signer",
    "Ed25519Signer",
    "sign_message",
    "verify_signature",
    "HAS_CURVE25519",
    "Curve25519Error",
    "Curve25519Signer",
    "verify_curve25519",
]
