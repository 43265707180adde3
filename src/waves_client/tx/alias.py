"""
Alias transaction.

The alias is written as a full alias address (version byte, chain id,
length-prefixed name) behind its own length prefix. The chain id is signed, so
the JSON carries it as ``chainId``. Payloads without it take the chain from
the ``sender`` address, then from the default ChainConfig.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator

from ..codec.writer import BinaryWriter, check_length
from ..enums import TransactionType
from ..runtime.config import check_chain_id, get_default_config
from .base import Transaction
from .fields import address_chain_id, get_int, get_optional_str, get_str, read_chain_id


class AliasTransaction(Transaction):
    """Bind a short name to the sender's address."""

    TYPE = TransactionType.ALIAS

    alias: str
    chain_id: str = Field(default_factory=lambda: get_default_config().chain_id)

    @field_validator("chain_id", mode="before")
    @classmethod
    def _check_chain(cls, v: Any) -> str:
        return check_chain_id(v or get_default_config().chain_id)

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        inner = len(self.alias) + 4
        check_length(inner, "alias")
        writer.short(inner, "alias")
        writer.alias(self.alias, ord(self.chain_id))
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "alias": self.alias,
            "chainId": ord(self.chain_id),
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> AliasTransaction:
        chain_id: Optional[str] = read_chain_id(data)
        if chain_id is None:
            chain_id = address_chain_id(get_optional_str(data, "sender"))
        return cls._build(
            **cls.header_from_json(data),
            alias=get_str(data, "alias"),
            chain_id=chain_id,
            fee=get_int(data, "fee"),
        )
