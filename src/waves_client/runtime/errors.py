"""
Waves Client Error Model

This module provides the error handling framework for the codec and signing
engine. Every failure is raised synchronously before any partial body or JSON
object is handed back to the caller.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes grouped by the stage that raises them."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    FIELD_TOO_LONG = 101
    UNSUPPORTED_ENTRY_TYPE = 102
    INVALID_FIELD = 103

    # Signing errors (300-399)
    NOT_SIGNED = 300
    MULTIPLE_PROOFS_NOT_SUPPORTED = 301
    INVALID_PROOF_INDEX = 302

    # Decoding errors (400-499)
    DECODING_ERROR = 400
    INVALID_IDENTIFIER = 401
    MISSING_FIELD = 402
    INVALID_BINARY = 403


class WavesError(Exception):
    """
    Base class for all waves_client errors.

    Carries a machine-readable code, optional details and the underlying
    exception when one library error is translated into another.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a waves_client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(WavesError):
    """A value cannot be written into a transaction body."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class SigningError(WavesError):
    """A transaction was rendered or verified without a usable proof."""

    def __init__(self, message: str = "Transaction is not signed", code: ErrorCode = ErrorCode.NOT_SIGNED,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ProofPolicyError(SigningError):
    """A proof slot was used that the transaction version does not allow."""

    def __init__(self, message: str = "Transaction type and version doesn't support multiple proofs",
                 code: ErrorCode = ErrorCode.MULTIPLE_PROOFS_NOT_SUPPORTED,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DecodingError(WavesError):
    """JSON or binary input cannot be turned back into a model."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


__all__ = [
    "ErrorCode",
    "WavesError",
    "EncodingError",
    "SigningError",
    "ProofPolicyError",
    "DecodingError",
]
