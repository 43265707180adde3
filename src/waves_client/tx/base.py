"""
Base models for signable ledger objects.

Every transaction and exchange order is a frozen pydantic model that knows how
to write its own body, how to render itself as node JSON and how to rebuild
itself from that JSON. The body is computed once and cached; proofs sign the
body and are never part of it.
"""

from __future__ import annotations
import hashlib
import json
import logging
from abc import abstractmethod
from datetime import datetime
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from ..codec.base58 import b58encode
from ..codec.writer import BinaryWriter
from ..crypto.ed25519 import PUBLIC_KEY_LENGTH
from ..enums import TransactionType
from ..runtime.errors import DecodingError, ErrorCode, ProofPolicyError, SigningError
from ..signers.signer import Signer, verify_signature
from .fields import coerce_timestamp, get_base58, get_date, get_optional_str, get_proofs, now_utc, render_header, to_millis
from .proofs import Proofs, check_proof_index

logger = logging.getLogger(__name__)

SignableT = TypeVar("SignableT", bound="Signable")


class Signable(BaseModel):
    """
    Anything that carries a body and proof slots.

    Subclasses implement ``write_body``, ``json_fields`` and ``from_json``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    SUPPORTS_PROOFS: ClassVar[bool] = False

    sender_public_key: bytes
    proofs: Proofs = Field(default_factory=Proofs)

    _body: Optional[bytes] = PrivateAttr(default=None)

    @field_validator("sender_public_key")
    @classmethod
    def _check_public_key(cls, v: bytes) -> bytes:
        if len(v) != PUBLIC_KEY_LENGTH:
            raise ValueError(f"sender public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(v)}")
        return v

    @abstractmethod
    def write_body(self, writer: BinaryWriter) -> None:
        """Write the signed fields in wire order."""
        pass

    @abstractmethod
    def json_fields(self) -> Dict[str, Any]:
        """JSON keys of this object without the signature or proofs."""
        pass

    @classmethod
    @abstractmethod
    def from_json(cls: Type[SignableT], data: Mapping[str, Any]) -> SignableT:
        """Rebuild the model, proofs included, from node JSON."""
        pass

    def body_bytes(self) -> bytes:
        """
        The exact bytes that get signed.

        Built on first use and cached; a failed build raises before anything
        is cached or signed.
        """
        if self._body is None:
            writer = BinaryWriter()
            self.write_body(writer)
            self._body = writer.to_bytes()
            logger.debug(f"Built {type(self).__name__} body ({len(self._body)} bytes)")
        return self._body

    @property
    def id(self) -> str:
        """Base58 BLAKE2b-256 digest of the body, the id the node assigns."""
        return b58encode(hashlib.blake2b(self.body_bytes(), digest_size=32).digest())

    def sign(self: SignableT, signer: Signer, proof_index: int = 0) -> SignableT:
        """
        Sign the body and store the signature at ``proof_index``.

        Re-signing a slot overwrites it; other slots are untouched.

        Raises:
            ProofPolicyError: For a slot the format cannot carry
        """
        check_proof_index(proof_index)
        if proof_index > 0 and not self.SUPPORTS_PROOFS:
            raise ProofPolicyError(details={"proofIndex": proof_index})
        body = self.body_bytes()
        self.proofs.set(proof_index, signer.sign(body))
        logger.debug(f"Signed {type(self).__name__} at proof slot {proof_index}")
        return self

    def verify_proof(self, public_key: Optional[bytes] = None, proof_index: int = 0,
                     verifier: Callable[[bytes, bytes, bytes], bool] = verify_signature) -> bool:
        """
        Check the proof at ``proof_index`` against the sender (or given) key.

        ``verifier`` takes ``(public_key, signature, message)``; pass
        ``verify_curve25519`` for proofs made by a Curve25519Signer.
        """
        signature = self.proofs.get(proof_index)
        if not signature:
            raise SigningError(f"Proof slot {proof_index} is empty")
        return verifier(public_key or self.sender_public_key, signature, self.body_bytes())

    def to_json(self) -> Dict[str, Any]:
        """
        Node JSON including the rendered ``signature`` or ``proofs`` field.

        Raises:
            SigningError: If no proof is present
            ProofPolicyError: If a legacy format carries more than one proof
        """
        rendered = self.proofs.render(self.SUPPORTS_PROOFS)
        out = self.json_fields()
        out.update(rendered)
        return out

    def to_json_str(self) -> str:
        return json.dumps(self.to_json(), separators=(",", ":"))

    def __eq__(self, other: Any) -> bool:
        # Field values and proofs only; the cached body is not compared.
        if not isinstance(other, Signable):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    @classmethod
    def _build(cls: Type[SignableT], **kwargs: Any) -> SignableT:
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise DecodingError(f"Invalid {cls.__name__} JSON: {e}", ErrorCode.INVALID_FIELD, cause=e)


class Transaction(Signable):
    """
    Common header of ledger transactions.

    ``TYPE`` is the discriminant byte; ``VERSION`` is set only by formats that
    write a version byte after it.
    """

    TYPE: ClassVar[TransactionType]
    VERSION: ClassVar[Optional[int]] = None

    fee: int
    timestamp: datetime = Field(default_factory=now_utc)
    sender: Optional[str] = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> datetime:
        return coerce_timestamp(v)

    @property
    def timestamp_ms(self) -> int:
        return to_millis(self.timestamp)

    @property
    def type_id(self) -> int:
        return int(self.TYPE)

    def write_header(self, writer: BinaryWriter) -> None:
        """Type byte, optional version byte, sender key."""
        writer.u8(self.type_id)
        if self.VERSION is not None:
            writer.u8(self.VERSION)
        writer.fixed_bytes(self.sender_public_key, PUBLIC_KEY_LENGTH, "senderPublicKey")

    def header_json(self) -> Dict[str, Any]:
        return render_header(self.type_id, self.sender_public_key, self.sender, self.VERSION)

    def tail_json(self) -> Dict[str, Any]:
        return {"fee": self.fee, "timestamp": self.timestamp_ms}

    @staticmethod
    def header_from_json(data: Mapping[str, Any]) -> Dict[str, Any]:
        """Constructor kwargs shared by every transaction."""
        return {
            "sender_public_key": get_base58(data, "senderPublicKey"),
            "sender": get_optional_str(data, "sender"),
            "timestamp": get_date(data, "timestamp"),
            "proofs": get_proofs(data),
        }
