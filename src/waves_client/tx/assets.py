"""
Asset transactions: issue, reissue, burn and fee sponsorship.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping

from ..codec.writer import BinaryWriter
from ..enums import TransactionType
from .base import Transaction
from .fields import get_bool, get_int, get_str


class IssueTransaction(Transaction):
    """Create a new asset."""

    TYPE = TransactionType.ISSUE

    name: str
    description: str = ""
    quantity: int
    decimals: int
    reissuable: bool

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.string_ascii(self.name, "name")
        writer.string_utf8(self.description, "description")
        writer.long(self.quantity, "quantity")
        writer.u8(self.decimals)
        writer.bool(self.reissuable)
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "name": self.name,
            "description": self.description,
            "quantity": self.quantity,
            "decimals": self.decimals,
            "reissuable": self.reissuable,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> IssueTransaction:
        return cls._build(
            **cls.header_from_json(data),
            name=get_str(data, "name"),
            description=data.get("description") or "",
            quantity=get_int(data, "quantity"),
            decimals=get_int(data, "decimals"),
            reissuable=get_bool(data, "reissuable"),
            fee=get_int(data, "fee"),
        )


class ReissueTransaction(Transaction):
    """Mint more of a reissuable asset."""

    TYPE = TransactionType.REISSUE

    asset_id: str
    quantity: int
    reissuable: bool

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.asset_id(self.asset_id)
        writer.long(self.quantity, "quantity")
        writer.bool(self.reissuable)
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "assetId": self.asset_id,
            "quantity": self.quantity,
            "reissuable": self.reissuable,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ReissueTransaction:
        return cls._build(
            **cls.header_from_json(data),
            asset_id=get_str(data, "assetId"),
            quantity=get_int(data, "quantity"),
            reissuable=get_bool(data, "reissuable"),
            fee=get_int(data, "fee"),
        )


class BurnTransaction(Transaction):
    """Destroy an amount of an asset. The JSON names the amount ``quantity``."""

    TYPE = TransactionType.BURN

    asset_id: str
    amount: int

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.asset_id(self.asset_id)
        writer.long(self.amount, "amount")
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "assetId": self.asset_id,
            "quantity": self.amount,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BurnTransaction:
        # Nodes report burns as "amount"; the submission format says "quantity".
        key = "quantity" if data.get("quantity") is not None else "amount"
        return cls._build(
            **cls.header_from_json(data),
            asset_id=get_str(data, "assetId"),
            amount=get_int(data, key),
            fee=get_int(data, "fee"),
        )


class SponsoredFeeTransaction(Transaction):
    """
    Let holders pay fees in ``asset_id``.

    A zero ``min_sponsored_asset_fee`` cancels sponsorship and is rendered as
    JSON ``null``.
    """

    TYPE = TransactionType.SPONSOR_FEE
    VERSION = 1
    SUPPORTS_PROOFS = True

    asset_id: str
    min_sponsored_asset_fee: int = 0

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        writer.asset_id(self.asset_id)
        writer.long(self.min_sponsored_asset_fee, "minSponsoredAssetFee")
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "assetId": self.asset_id,
            "minSponsoredAssetFee": self.min_sponsored_asset_fee or None,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SponsoredFeeTransaction:
        return cls._build(
            **cls.header_from_json(data),
            asset_id=get_str(data, "assetId"),
            min_sponsored_asset_fee=get_int(data, "minSponsoredAssetFee", 0),
            fee=get_int(data, "fee"),
        )
