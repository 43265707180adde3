"""
Set-script transaction: attach compiled script bytes to the sender's account,
or clear the script with ``None``.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_validator

from ..codec.writer import BinaryWriter
from ..crypto.ed25519 import PUBLIC_KEY_LENGTH
from ..enums import TransactionType
from ..runtime.config import check_chain_id, get_default_config
from .base import Transaction
from .fields import address_chain_id, decode_binary, encode_base64, get_int, get_optional_str, read_chain_id


class SetScriptTransaction(Transaction):
    """Install or remove an account script."""

    TYPE = TransactionType.SET_SCRIPT
    VERSION = 1
    SUPPORTS_PROOFS = True

    script: Optional[bytes] = None
    chain_id: str = Field(default_factory=lambda: get_default_config().chain_id)

    @field_validator("chain_id", mode="before")
    @classmethod
    def _check_chain(cls, v: Any) -> str:
        return check_chain_id(v or get_default_config().chain_id)

    def write_header(self, writer: BinaryWriter) -> None:
        # Chain id sits between the version byte and the sender key.
        writer.u8(self.type_id)
        writer.u8(self.VERSION)
        writer.u8(ord(self.chain_id))
        writer.fixed_bytes(self.sender_public_key, PUBLIC_KEY_LENGTH, "senderPublicKey")

    def write_body(self, writer: BinaryWriter) -> None:
        self.write_header(writer)
        if self.script is None:
            writer.u8(0)
        else:
            writer.u8(1)
            writer.len_prefixed_bytes(self.script, "script")
        writer.long(self.fee, "fee")
        writer.long(self.timestamp_ms, "timestamp")

    def json_fields(self) -> Dict[str, Any]:
        out = self.header_json()
        out.update({
            "chainId": ord(self.chain_id),
            "script": encode_base64(self.script) if self.script is not None else None,
        })
        out.update(self.tail_json())
        return out

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SetScriptTransaction:
        script = get_optional_str(data, "script")
        return cls._build(
            **cls.header_from_json(data),
            script=decode_binary(script) if script else None,
            chain_id=read_chain_id(data) or address_chain_id(get_optional_str(data, "sender")),
            fee=get_int(data, "fee"),
        )
