"""
Placeholder for transaction types this package does not model.

The raw JSON is kept untouched so it can be inspected or forwarded; there is
no body to sign because the layout is not known.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from ..runtime.errors import EncodingError, ErrorCode
from .fields import get_proofs
from .proofs import Proofs


class UnknownTransaction(BaseModel):
    """A transaction whose ``type`` has no registered model."""

    model_config = ConfigDict(frozen=True)

    type_id: Optional[Any] = None
    raw: Dict[str, Any]

    @property
    def sender_public_key(self) -> Optional[str]:
        return self.raw.get("senderPublicKey")

    @property
    def timestamp_ms(self) -> Optional[int]:
        return self.raw.get("timestamp")

    @property
    def proofs(self) -> Proofs:
        """Proofs or legacy signature carried by the raw JSON."""
        return get_proofs(self.raw)

    def body_bytes(self) -> bytes:
        raise EncodingError(
            f"Cannot build a body for unknown transaction type {self.type_id!r}",
            ErrorCode.INVALID_FIELD,
        )

    def to_json(self) -> Dict[str, Any]:
        return dict(self.raw)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> UnknownTransaction:
        return cls(type_id=data.get("type"), raw=dict(data))
