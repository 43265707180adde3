"""
Proof slots for transactions and orders.

Every signable object carries eight ordered proof slots. Legacy formats only
ever use slot 0 and render it as ``signature``; proof-capable formats render
the slots up to the last signed one as a ``proofs`` array.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from ..codec.base58 import b58encode
from ..runtime.errors import ProofPolicyError, SigningError, ErrorCode

MAX_PROOFS = 8


def check_proof_index(index: int) -> None:
    """Raise ProofPolicyError unless ``index`` is a valid slot."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < MAX_PROOFS:
        raise ProofPolicyError(
            f"Proof index must be in 0..{MAX_PROOFS - 1}, got {index!r}",
            ErrorCode.INVALID_PROOF_INDEX,
        )


def last_signed_index(slots: Sequence[Optional[bytes]]) -> int:
    """Index of the last non-empty slot, or -1 when nothing is signed."""
    for i in range(len(slots) - 1, -1, -1):
        if slots[i]:
            return i
    return -1


def render_proofs(slots: Sequence[Optional[bytes]], supports_proofs: bool) -> Dict[str, Any]:
    """
    Render proof slots as the JSON field the node expects.

    Args:
        slots: Proof slots in order; empty slots are ``None`` or ``b""``
        supports_proofs: Whether the format has a ``proofs`` array

    Returns:
        ``{"proofs": [...]}`` or ``{"signature": ...}``

    Raises:
        SigningError: If no slot is signed
        ProofPolicyError: If a legacy format has a proof beyond slot 0
    """
    last = last_signed_index(slots)
    if last < 0:
        raise SigningError("Transaction is not signed")
    rendered = [b58encode(p) if p else "" for p in slots[:last + 1]]
    if supports_proofs:
        return {"proofs": rendered}
    if last > 0:
        raise ProofPolicyError(details={"lastIndex": last})
    return {"signature": rendered[0]}


class Proofs:
    """Fixed-capacity ordered list of optional signatures."""

    __slots__ = ("_slots",)

    def __init__(self, slots: Optional[Iterable[Optional[bytes]]] = None):
        items: List[Optional[bytes]] = [bytes(s) if s else None for s in (slots or ())]
        if len(items) > MAX_PROOFS:
            raise ProofPolicyError(
                f"At most {MAX_PROOFS} proofs are allowed, got {len(items)}",
                ErrorCode.INVALID_PROOF_INDEX,
            )
        self._slots = items + [None] * (MAX_PROOFS - len(items))

    def set(self, index: int, signature: bytes) -> None:
        """Store a signature at ``index``; other slots are left alone."""
        check_proof_index(index)
        self._slots[index] = bytes(signature) if signature else None

    def get(self, index: int) -> Optional[bytes]:
        check_proof_index(index)
        return self._slots[index]

    def clear(self, index: int) -> None:
        check_proof_index(index)
        self._slots[index] = None

    def last_index(self) -> int:
        return last_signed_index(self._slots)

    @property
    def slots(self) -> tuple:
        return tuple(self._slots)

    @property
    def is_signed(self) -> bool:
        return self.last_index() >= 0

    def render(self, supports_proofs: bool) -> Dict[str, Any]:
        return render_proofs(self._slots, supports_proofs)

    def __getitem__(self, index: int) -> Optional[bytes]:
        return self.get(index)

    def __len__(self) -> int:
        return MAX_PROOFS

    def __iter__(self) -> Iterator[Optional[bytes]]:
        return iter(self._slots)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Proofs):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None

    def __repr__(self) -> str:
        return f"Proofs(signed={[i for i, p in enumerate(self._slots) if p]})"
