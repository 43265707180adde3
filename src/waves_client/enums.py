"""Enumerations shared by the codec, the models and the dispatcher."""

from enum import Enum, IntEnum


class TransactionType(IntEnum):
    """Ledger transaction type discriminants (first body byte)."""

    ISSUE = 3
    TRANSFER = 4
    REISSUE = 5
    BURN = 6
    EXCHANGE = 7
    LEASE = 8
    LEASE_CANCEL = 9
    ALIAS = 10
    MASS_TRANSFER = 11
    DATA = 12
    SET_SCRIPT = 13
    SPONSOR_FEE = 14


class DataEntryType(IntEnum):
    """Value tags of a data transaction entry."""

    INTEGER = 0
    BOOLEAN = 1
    BINARY = 2

    @property
    def json_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_json_name(cls, name: str) -> "DataEntryType":
        return cls[name.upper()]


class OrderType(Enum):
    """Exchange order side. The ordinal is the body byte, the value the JSON text."""

    BUY = "buy"
    SELL = "sell"

    @property
    def ordinal(self) -> int:
        return 0 if self is OrderType.BUY else 1


__all__ = ["TransactionType", "DataEntryType", "OrderType"]
