"""
Leasing transactions.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping

from ..codec.writer import ASSET_ID_LENGTH, BinaryWriter
from ..codec.base58 import b58decode
from ..enums import TransactionType
from .base import Transaction
from .fields import get_int, get_str


class LeaseTransaction(Transaction):
    """Lease native balance to a recipient's generating balance."""

    TYPE = TransactionType.LEASE

    recipient: str
    amount: int

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.recipient(self.recipient)
        writer.long(self.amount, "amount")
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "recipient": self.recipient,
            "amount": self.amount,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> LeaseTransaction:
        return cls._build(
            **cls.header_from_json(data),
            recipient=get_str(data, "recipient"),
            amount=get_int(data, "amount"),
            fee=get_int(data, "fee"),
        )


class LeaseCancelTransaction(Transaction):
    """Cancel the lease created by transaction ``lease_id``."""

    TYPE = TransactionType.LEASE_CANCEL

    lease_id: str

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")
        writer.fixed_bytes(b58decode(self.lease_id), ASSET_ID_LENGTH, "leaseId")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out["leaseId"] = self.lease_id
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> LeaseCancelTransaction:
        return cls._build(
            **cls.header_from_json(data),
            lease_id=get_str(data, "leaseId"),
            fee=get_int(data, "fee"),
        )
