"""
Exchange transaction: the matcher settles a buy order against a sell order.

Both orders are embedded with their signatures, each behind a 32-bit length.
The matcher signs the transaction, so ``sender_public_key`` is the matcher's
key. The body has no sender key of its own.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Tuple

from pydantic import model_validator

from ..codec.writer import BinaryWriter
from ..enums import OrderType, TransactionType
from ..runtime.errors import DecodingError, EncodingError, ErrorCode
from .base import Transaction
from .fields import get_int, require
from .orders import Order


def _order_json(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = require(data, key)
    if not isinstance(value, Mapping):
        raise DecodingError(f"Field '{key}' must be an object", ErrorCode.INVALID_FIELD,
                            details={"field": key})
    return value


class ExchangeTransaction(Transaction):
    """A trade of ``amount`` at ``price`` between two signed orders."""

    TYPE = TransactionType.EXCHANGE

    buy_order: Order
    sell_order: Order
    price: int
    amount: int
    buy_matcher_fee: int
    sell_matcher_fee: int

    @model_validator(mode="after")
    def _check_sides(self) -> ExchangeTransaction:
        if self.buy_order.order_type is not OrderType.BUY:
            raise EncodingError("buyOrder must be a buy order", ErrorCode.INVALID_FIELD,
                                details={"field": "buyOrder"})
        if self.sell_order.order_type is not OrderType.SELL:
            raise EncodingError("sellOrder must be a sell order", ErrorCode.INVALID_FIELD,
                                details={"field": "sellOrder"})
        return self

    def write_body(self, writer: BinaryWriter) -> None:
        buy = self.buy_order.signed_bytes()
        sell = self.sell_order.signed_bytes()
        writer.u8(self.type_id)
        writer.int32(len(buy), "buyOrder")
        writer.int32(len(sell), "sellOrder")
        writer.bytes(buy)
        writer.bytes(sell)
        writer.long(self.price, "price")
        writer.long(self.amount, "amount")
        writer.long(self.buy_matcher_fee, "buyMatcherFee")
        writer.long(self.sell_matcher_fee, "sellMatcherFee")
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "buyOrder": self.buy_order.to_json(),
            "sellOrder": self.sell_order.to_json(),
            "price": self.price,
            "amount": self.amount,
            "buyMatcherFee": self.buy_matcher_fee,
            "sellMatcherFee": self.sell_matcher_fee,
        })
        out.update(self.tail_json())
        return out

    @staticmethod
    def orders_from_json(data: Mapping[str, Any]) -> Tuple[Order, Order]:
        """
        Buy and sell order of the payload.

        Nodes may also report them as ``order1``/``order2`` in either order;
        those are sorted by ``orderType``.
        """
        if "buyOrder" in data or "sellOrder" in data:
            return (Order.from_json(_order_json(data, "buyOrder")),
                    Order.from_json(_order_json(data, "sellOrder")))
        first = Order.from_json(_order_json(data, "order1"))
        second = Order.from_json(_order_json(data, "order2"))
        if first.order_type is OrderType.BUY:
            return first, second
        return second, first

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ExchangeTransaction:
        buy_order, sell_order = cls.orders_from_json(data)
        return cls._build(
            **cls.header_from_json(data),
            buy_order=buy_order,
            sell_order=sell_order,
            price=get_int(data, "price"),
            amount=get_int(data, "amount"),
            buy_matcher_fee=get_int(data, "buyMatcherFee"),
            sell_matcher_fee=get_int(data, "sellMatcherFee"),
            fee=get_int(data, "fee"),
        )
