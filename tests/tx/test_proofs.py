"""
Proof slot rendering.

Legacy formats carry exactly one ``signature``; proof-capable formats carry a
``proofs`` array up to the last signed slot with empty strings for gaps.
"""

import pytest

from waves_client.codec import b58encode
from waves_client.runtime.errors import ErrorCode, ProofPolicyError, SigningError
from waves_client.tx import (
    DataTransaction,
    LeaseTransaction,
    Proofs,
    make_data_transaction,
    make_lease_transaction,
    render_proofs,
)


@pytest.mark.unit
class TestRenderProofs:
    """The pure rendering function."""

    def test_legacy_single_signature(self):
        assert render_proofs([b"\x01" * 64], False) == {"signature": b58encode(b"\x01" * 64)}

    def test_modern_single_proof(self):
        assert render_proofs([b"\x01" * 64], True) == {"proofs": [b58encode(b"\x01" * 64)]}

    def test_modern_gap_is_empty_string(self):
        sig = b"\x02" * 64
        rendered = render_proofs([sig, None, sig], True)
        assert rendered == {"proofs": [b58encode(sig), "", b58encode(sig)]}

    def test_trailing_empty_slots_are_dropped(self):
        rendered = render_proofs([b"\x03" * 64, None, None, None], True)
        assert len(rendered["proofs"]) == 1

    def test_legacy_second_slot_rejected(self):
        with pytest.raises(ProofPolicyError) as exc_info:
            render_proofs([b"\x01" * 64, b"\x02" * 64], False)
        assert exc_info.value.code == ErrorCode.MULTIPLE_PROOFS_NOT_SUPPORTED
        assert str(exc_info.value.message) == "Transaction type and version doesn't support multiple proofs"

    def test_legacy_only_slot_one_rejected(self):
        with pytest.raises(ProofPolicyError):
            render_proofs([None, b"\x02" * 64], False)

    def test_nothing_signed(self):
        with pytest.raises(SigningError) as exc_info:
            render_proofs([None] * 8, True)
        assert exc_info.value.message == "Transaction is not signed"

    def test_policy_error_is_a_signing_error(self):
        assert issubclass(ProofPolicyError, SigningError)


@pytest.mark.unit
class TestProofs:
    """The slot container."""

    def test_has_eight_slots(self):
        proofs = Proofs()
        assert len(proofs) == 8
        assert not proofs.is_signed
        assert proofs.last_index() == -1

    def test_set_and_clear(self):
        proofs = Proofs()
        proofs.set(3, b"\x01" * 64)
        assert proofs[3] == b"\x01" * 64
        assert proofs.last_index() == 3
        proofs.clear(3)
        assert not proofs.is_signed

    @pytest.mark.parametrize("index", [-1, 8, True, "0"])
    def test_invalid_index(self, index):
        with pytest.raises(ProofPolicyError) as exc_info:
            Proofs().set(index, b"\x01" * 64)
        assert exc_info.value.code == ErrorCode.INVALID_PROOF_INDEX

    def test_too_many_slots(self):
        with pytest.raises(ProofPolicyError):
            Proofs([b"\x01"] * 9)


@pytest.mark.unit
class TestSignPolicy:
    """Signing at a slot the format cannot carry."""

    def test_legacy_sign_slot_one_raises(self, signer, address, timestamp_ms):
        tx = LeaseTransaction(sender_public_key=signer.public_key, recipient=address,
                              amount=1000, fee=100000, timestamp=timestamp_ms)
        with pytest.raises(ProofPolicyError):
            tx.sign(signer, proof_index=1)
        assert not tx.proofs.is_signed

    def test_legacy_renders_signature(self, signer, address, timestamp_ms):
        tx = make_lease_transaction(signer, address, 1000, 100000, timestamp=timestamp_ms)
        out = tx.to_json()
        assert "signature" in out
        assert "proofs" not in out

    def test_modern_slots_zero_and_two(self, signer, other_signer, timestamp_ms):
        tx = make_data_transaction(signer, [("k", 1)], 100000, timestamp=timestamp_ms)
        tx.sign(other_signer, proof_index=2)
        proofs = tx.to_json()["proofs"]
        assert len(proofs) == 3
        assert proofs[1] == ""
        assert proofs[0] == b58encode(tx.proofs[0])
        assert proofs[2] == b58encode(tx.proofs[2])
        assert "signature" not in tx.to_json()

    def test_modern_only_slot_one(self, signer, timestamp_ms):
        tx = DataTransaction(sender_public_key=signer.public_key, entries=[("k", True)],
                             fee=100000, timestamp=timestamp_ms)
        tx.sign(signer, proof_index=1)
        assert tx.to_json()["proofs"] == ["", b58encode(tx.proofs[1])]

    def test_unsigned_to_json_raises(self, signer, address, timestamp_ms):
        tx = LeaseTransaction(sender_public_key=signer.public_key, recipient=address,
                              amount=1000, fee=100000, timestamp=timestamp_ms)
        with pytest.raises(SigningError):
            tx.to_json()

    def test_resign_overwrites_slot(self, signer, other_signer, timestamp_ms):
        tx = make_data_transaction(signer, [("k", 1)], 100000, timestamp=timestamp_ms)
        tx.sign(other_signer, proof_index=0)
        assert tx.verify_proof(other_signer.public_key)
        assert not tx.verify_proof()
