"""
Shared fixtures: a deterministic signer, a fixed timestamp and sample
identifiers of the right widths.
"""

import pytest

from waves_client.codec import b58encode
from waves_client.signers import Ed25519Signer
from waves_client.tx import make_order
from waves_client.tx.fields import from_millis

FIXED_TIMESTAMP_MS = 1526477921829


@pytest.fixture
def signer():
    """Deterministic Ed25519 signer for consistent bodies and signatures."""
    return Ed25519Signer.from_seed("waves_client test seed")


@pytest.fixture
def other_signer():
    return Ed25519Signer.from_seed("waves_client second party")


@pytest.fixture
def timestamp_ms():
    return FIXED_TIMESTAMP_MS


@pytest.fixture
def timestamp():
    return from_millis(FIXED_TIMESTAMP_MS)


@pytest.fixture
def asset_id_bytes():
    return bytes(range(1, 33))


@pytest.fixture
def asset_id(asset_id_bytes):
    return b58encode(asset_id_bytes)


@pytest.fixture
def address_bytes():
    # version 1, chain 'W', 20-byte hash, 4-byte checksum
    return bytes([1, ord("W")]) + bytes(range(100, 120)) + b"\xaa\xbb\xcc\xdd"


@pytest.fixture
def address(address_bytes):
    return b58encode(address_bytes)


@pytest.fixture
def order_pair(signer, other_signer, asset_id, timestamp_ms):
    """Signed buy and sell orders matched by ``signer``."""
    common = dict(price=150, amount=1000, expiration=timestamp_ms + 86400000,
                  matcher_fee=300000, timestamp=timestamp_ms)
    buy = make_order(other_signer, signer.public_key_base58, "buy", asset_id, None, **common)
    sell = make_order(other_signer, signer.public_key_base58, "sell", asset_id, None, **common)
    return buy, sell
