"""
Transfer transactions.

Both variants carry an attachment: raw bytes in the body, base58 text in JSON.
Callers may pass text, which is stored as its UTF-8 bytes.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..codec.base58 import b58decode, b58encode
from ..codec.writer import BinaryWriter
from ..enums import TransactionType
from ..runtime.errors import DecodingError, ErrorCode
from .base import Transaction
from .fields import get_int, get_optional_str, get_str, require


def _attachment_bytes(v: Any) -> bytes:
    if v is None:
        return b""
    if isinstance(v, str):
        return v.encode("utf-8")
    return v


def _attachment_from_json(data: Mapping[str, Any]) -> bytes:
    text = get_optional_str(data, "attachment")
    return b58decode(text) if text else b""


class TransferTransaction(Transaction):
    """Send ``amount`` of an asset (``None`` for the native one) to a recipient."""

    TYPE = TransactionType.TRANSFER

    recipient: str
    amount: int
    asset_id: Optional[str] = None
    fee_asset_id: Optional[str] = None
    attachment: bytes = b""

    @field_validator("attachment", mode="before")
    @classmethod
    def _coerce_attachment(cls, v: Any) -> bytes:
        return _attachment_bytes(v)

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.optional_asset(self.asset_id, "assetId")
        writer.optional_asset(self.fee_asset_id, "feeAssetId")
        writer.long(self.timestamp_ms, "timestamp")
        writer.long(self.amount, "amount")
        writer.long(self.fee, "fee")
        writer.recipient(self.recipient)
        writer.len_prefixed_bytes(self.attachment, "attachment")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "recipient": self.recipient,
            "amount": self.amount,
            "assetId": self.asset_id,
            "fee": self.fee,
            "feeAssetId": self.fee_asset_id,
            "timestamp": self.timestamp_ms,
            "attachment": b58encode(self.attachment),
        })
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> TransferTransaction:
        return cls._build(
            **cls.header_from_json(data),
            recipient=get_str(data, "recipient"),
            amount=get_int(data, "amount"),
            asset_id=get_optional_str(data, "assetId"),
            fee_asset_id=get_optional_str(data, "feeAssetId"),
            attachment=_attachment_from_json(data),
            fee=get_int(data, "fee"),
        )


class TransferItem(BaseModel):
    """One recipient of a mass transfer."""

    model_config = ConfigDict(frozen=True)

    recipient: str
    amount: int

    def to_json(self) -> Dict[str, Any]:
        return {"recipient": self.recipient, "amount": self.amount}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> TransferItem:
        if not isinstance(data, Mapping):
            raise DecodingError("Transfer entry must be an object", ErrorCode.INVALID_FIELD)
        return cls(recipient=get_str(data, "recipient"), amount=get_int(data, "amount"))


class MassTransferTransaction(Transaction):
    """Send one asset to many recipients, in the order given."""

    TYPE = TransactionType.MASS_TRANSFER
    VERSION = 1
    SUPPORTS_PROOFS = True

    transfers: List[TransferItem]
    asset_id: Optional[str] = None
    attachment: bytes = b""

    @field_validator("transfers", mode="before")
    @classmethod
    def _coerce_transfers(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [TransferItem(recipient=t[0], amount=t[1]) if isinstance(t, tuple) else t for t in v]
        return v

    @field_validator("attachment", mode="before")
    @classmethod
    def _coerce_attachment(cls, v: Any) -> bytes:
        return _attachment_bytes(v)

    @property
    def total_amount(self) -> int:
        return sum(t.amount for t in self.transfers)

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.optional_asset(self.asset_id, "assetId")
        writer.short(len(self.transfers), "transfers")
        for item in self.transfers:
            writer.recipient(item.recipient)
            writer.long(item.amount, "amount")
        writer.long(self.timestamp_ms, "timestamp")
        writer.long(self.fee, "fee")
        writer.len_prefixed_bytes(self.attachment, "attachment")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "assetId": self.asset_id,
            "transfers": [t.to_json() for t in self.transfers],
        })
        out.update(self.tail_json())
        out["attachment"] = b58encode(self.attachment)
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> MassTransferTransaction:
        raw = require(data, "transfers")
        if not isinstance(raw, list):
            raise DecodingError("Field 'transfers' must be an array", ErrorCode.INVALID_FIELD,
                                details={"field": "transfers"})
        return cls._build(
            **cls.header_from_json(data),
            transfers=[TransferItem.from_json(t) for t in raw],
            asset_id=get_optional_str(data, "assetId"),
            attachment=_attachment_from_json(data),
            fee=get_int(data, "fee"),
        )
