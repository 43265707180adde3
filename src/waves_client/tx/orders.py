"""
Exchange orders for the matcher.

Orders and order cancellations are signed like transactions but have no type
byte and are not part of the ledger's transaction set, so the type registry
never dispatches them.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..codec.base58 import b58decode, b58encode
from ..codec.writer import ASSET_ID_LENGTH, BinaryWriter
from ..crypto.ed25519 import PUBLIC_KEY_LENGTH
from ..enums import OrderType
from ..runtime.errors import DecodingError, ErrorCode, SigningError
from .base import Signable
from .fields import coerce_timestamp, get_base58, get_date, get_int, get_optional_str, get_proofs, get_str, now_utc, to_millis


class AssetPair(BaseModel):
    """
    Amount and price asset of an order; ``None`` is the native asset.

    The native asset is emitted as JSON ``null`` and read back from either
    ``null`` or a missing key.
    """

    model_config = ConfigDict(frozen=True)

    amount_asset: Optional[str] = None
    price_asset: Optional[str] = None

    def write(self, writer: BinaryWriter) -> None:
        writer.optional_asset(self.amount_asset, "amountAsset")
        writer.optional_asset(self.price_asset, "priceAsset")

    def to_json(self) -> Dict[str, Optional[str]]:
        return {"amountAsset": self.amount_asset, "priceAsset": self.price_asset}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> AssetPair:
        if not isinstance(data, Mapping):
            raise DecodingError("Field 'assetPair' must be an object", ErrorCode.INVALID_FIELD,
                                details={"field": "assetPair"})
        return cls(
            amount_asset=get_optional_str(data, "amountAsset"),
            price_asset=get_optional_str(data, "priceAsset"),
        )


class Order(Signable):
    """A limit order placed with a matcher."""

    matcher_public_key: bytes
    asset_pair: AssetPair
    order_type: OrderType
    price: int
    amount: int
    expiration: int
    matcher_fee: int
    timestamp: datetime = Field(default_factory=now_utc)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> datetime:
        return coerce_timestamp(v)

    @field_validator("order_type", mode="before")
    @classmethod
    def _coerce_order_type(cls, v: Any) -> Any:
        return OrderType(v.lower()) if isinstance(v, str) else v

    @property
    def timestamp_ms(self) -> int:
        return to_millis(self.timestamp)

    def write_body(self, writer: BinaryWriter) -> None:
        writer.fixed_bytes(self.sender_public_key, PUBLIC_KEY_LENGTH, "senderPublicKey")
        writer.fixed_bytes(self.matcher_public_key, PUBLIC_KEY_LENGTH, "matcherPublicKey")
        self.asset_pair.write(writer)
        writer.u8(self.order_type.ordinal)
        writer.long(self.price, "price")
        writer.long(self.amount, "amount")
        writer.long(self.timestamp_ms, "timestamp")
        writer.long(self.expiration, "expiration")
        writer.long(self.matcher_fee, "matcherFee")

    def signed_bytes(self) -> bytes:
        """
        Body followed by the slot 0 signature, the form embedded in an exchange.

        Raises:
            SigningError: If the order is not signed
        """
        signature = self.proofs.get(0)
        if not signature:
            raise SigningError("Order is not signed")
        return self.body_bytes() + signature

    def json_fields(self) -> Dict[str, Any]:
        return {
            "senderPublicKey": b58encode(self.sender_public_key),
            "matcherPublicKey": b58encode(self.matcher_public_key),
            "assetPair": self.asset_pair.to_json(),
            "orderType": self.order_type.value,
            "price": self.price,
            "amount": self.amount,
            "timestamp": self.timestamp_ms,
            "expiration": self.expiration,
            "matcherFee": self.matcher_fee,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Order:
        order_type = get_str(data, "orderType")
        try:
            side = OrderType(order_type.lower())
        except ValueError as e:
            raise DecodingError(f"Invalid order type {order_type!r}", ErrorCode.INVALID_FIELD,
                                details={"field": "orderType"}, cause=e)
        return cls._build(
            sender_public_key=get_base58(data, "senderPublicKey"),
            matcher_public_key=get_base58(data, "matcherPublicKey"),
            asset_pair=AssetPair.from_json(data.get("assetPair") or {}),
            order_type=side,
            price=get_int(data, "price"),
            amount=get_int(data, "amount"),
            timestamp=get_date(data, "timestamp"),
            expiration=get_int(data, "expiration"),
            matcher_fee=get_int(data, "matcherFee"),
            proofs=get_proofs(data),
        )


class OrderCancel(Signable):
    """
    Request to cancel ``order_id``.

    The JSON names the sender's public key ``sender``.
    """

    order_id: str

    def write_body(self, writer: BinaryWriter) -> None:
        writer.fixed_bytes(self.sender_public_key, PUBLIC_KEY_LENGTH, "senderPublicKey")
        writer.fixed_bytes(b58decode(self.order_id), ASSET_ID_LENGTH, "orderId")

    def json_fields(self) -> Dict[str, Any]:
        return {
            "sender": b58encode(self.sender_public_key),
            "orderId": self.order_id,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> OrderCancel:
        key = "sender" if data.get("sender") is not None else "senderPublicKey"
        return cls._build(
            sender_public_key=get_base58(data, key),
            order_id=get_str(data, "orderId"),
            proofs=get_proofs(data),
        )
