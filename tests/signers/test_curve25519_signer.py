"""
Tests for the Curve25519 signer. Signing tests need the ``curve25519`` extra.
"""

import pytest

from waves_client.signers import HAS_CURVE25519, Curve25519Error, Curve25519Signer, Signer, verify_curve25519
from waves_client.signers import curve25519
from waves_client.tx import from_json, make_transfer_transaction

requires_curve25519 = pytest.mark.skipif(not HAS_CURVE25519, reason="python-axolotl-curve25519 not installed")


@pytest.fixture
def curve_signer():
    return Curve25519Signer.from_seed("waves_client curve seed")


@pytest.mark.unit
@requires_curve25519
class TestCurve25519Signer:
    """Signer behaviour."""

    def test_is_signer(self, curve_signer):
        assert isinstance(curve_signer, Signer)
        assert len(curve_signer.public_key) == 32

    def test_seed_is_deterministic(self):
        assert Curve25519Signer.from_seed("s").public_key == Curve25519Signer.from_seed(b"s").public_key

    def test_sign_and_verify(self, curve_signer):
        signature = curve_signer.sign(b"body bytes")
        assert len(signature) == 64
        assert curve_signer.verify(signature, b"body bytes")
        assert not curve_signer.verify(signature, b"other bytes")

    def test_wrong_key_length(self):
        with pytest.raises(Curve25519Error):
            Curve25519Signer(b"\x01" * 31)

    def test_transaction_proof(self, curve_signer, address, timestamp_ms):
        tx = make_transfer_transaction(curve_signer, address, 5, None, 100000, timestamp=timestamp_ms)
        assert tx.verify_proof(verifier=verify_curve25519)
        decoded = from_json(tx.to_json())
        assert decoded.verify_proof(verifier=verify_curve25519)


@pytest.mark.unit
class TestMissingBackend:
    """Without the backend the signer refuses to work."""

    def test_signer_raises(self, monkeypatch):
        monkeypatch.setattr(curve25519, "HAS_CURVE25519", False)
        with pytest.raises(Curve25519Error) as exc_info:
            Curve25519Signer(b"\x01" * 32)
        assert "python-axolotl-curve25519" in exc_info.value.message

    def test_verify_raises(self, monkeypatch):
        monkeypatch.setattr(curve25519, "HAS_CURVE25519", False)
        with pytest.raises(Curve25519Error):
            verify_curve25519(b"\x01" * 32, b"\x02" * 64, b"msg")
