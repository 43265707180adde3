"""
JSON decoding through the type registry.
"""

import json

import pytest

from waves_client.codec import b58encode
from waves_client.enums import TransactionType
from waves_client.runtime.config import TESTNET
from waves_client.runtime.errors import DecodingError, EncodingError, ErrorCode
from waves_client.tx import (
    TRANSACTION_REGISTRY,
    AliasTransaction,
    BurnTransaction,
    DataTransaction,
    ExchangeTransaction,
    Order,
    OrderCancel,
    SetScriptTransaction,
    SponsoredFeeTransaction,
    TransferTransaction,
    UnknownTransaction,
    from_json,
    list_transaction_types,
    lookup_transaction_class,
    make_alias_transaction,
    make_burn_transaction,
    make_data_transaction,
    make_exchange_transaction,
    make_issue_transaction,
    make_lease_cancel_transaction,
    make_lease_transaction,
    make_mass_transfer_transaction,
    make_order,
    make_order_cancel,
    make_reissue_transaction,
    make_set_script_transaction,
    make_sponsored_fee_transaction,
    make_transfer_transaction,
)


@pytest.fixture
def signed_transactions(signer, address, asset_id, timestamp_ms, order_pair):
    """One signed instance of every registered transaction type."""
    ts = timestamp_ms
    return [
        make_issue_transaction(signer, "Token", "desc", 1000, 2, True, 100000000, timestamp=ts),
        make_transfer_transaction(signer, address, 5, asset_id, 100000, attachment=b"\x00\x01", timestamp=ts),
        make_reissue_transaction(signer, asset_id, 10, True, 100000, timestamp=ts),
        make_burn_transaction(signer, asset_id, 100, 500000, timestamp=ts),
        make_exchange_transaction(signer, *order_pair, 150, 1000, 300000, 300000, 300000, timestamp=ts),
        make_lease_transaction(signer, "alias:W:bob", 1000, 100000, timestamp=ts),
        make_lease_cancel_transaction(signer, asset_id, 100000, timestamp=ts),
        make_alias_transaction(signer, "carol", 100000, timestamp=ts),
        make_alias_transaction(signer, "dave", 100000, config=TESTNET, timestamp=ts),
        make_set_script_transaction(signer, None, 1000000, config=TESTNET, timestamp=ts),
        make_mass_transfer_transaction(signer, [(address, 1), (address, 2)], asset_id, 200000, timestamp=ts),
        make_data_transaction(signer, [("n", -3), ("b", True), ("x", b"\xff")], 100000, timestamp=ts),
        make_set_script_transaction(signer, b"\x01\x02", 1000000, timestamp=ts),
        make_sponsored_fee_transaction(signer, asset_id, 100, 100000000, timestamp=ts),
    ]


@pytest.mark.unit
class TestRoundTrip:
    """Decoding rendered JSON yields the same body and proofs."""

    def test_every_type_is_covered(self, signed_transactions):
        assert {int(tx.TYPE) for tx in signed_transactions} == {int(t) for t in TransactionType}

    def test_round_trip(self, signed_transactions):
        for tx in signed_transactions:
            decoded = from_json(json.loads(tx.to_json_str()))
            assert type(decoded) is type(tx)
            assert decoded.body_bytes() == tx.body_bytes()
            assert decoded.proofs == tx.proofs
            assert decoded.to_json() == tx.to_json()
            assert decoded.id == tx.id
            assert decoded == tx

    def test_order_round_trip(self, signer, other_signer, asset_id, timestamp_ms):
        order = make_order(signer, other_signer.public_key_base58, "buy", None, asset_id,
                           100, 10, timestamp_ms + 1000, 300000, timestamp=timestamp_ms)
        decoded = Order.from_json(order.to_json())
        assert decoded.body_bytes() == order.body_bytes()
        assert decoded.asset_pair.amount_asset is None
        assert decoded.verify_proof()

    def test_order_cancel_round_trip(self, signer, asset_id):
        cancel = make_order_cancel(signer, asset_id)
        decoded = OrderCancel.from_json(cancel.to_json())
        assert decoded.body_bytes() == cancel.body_bytes()
        assert decoded.proofs == cancel.proofs


@pytest.mark.unit
class TestDispatch:
    """Type lookup and decoding edge cases."""

    def test_registry_complete(self):
        assert set(TRANSACTION_REGISTRY) == set(TransactionType)
        for type_id, cls in TRANSACTION_REGISTRY.items():
            assert cls.TYPE is type_id

    def test_list_types(self):
        types = list_transaction_types()
        assert types[4] == "TransferTransaction"
        assert len(types) == len(TransactionType)

    def test_lookup(self):
        assert lookup_transaction_class(6) is BurnTransaction
        with pytest.raises(KeyError):
            lookup_transaction_class(True)

    def test_unknown_type(self):
        raw = {"type": 99, "senderPublicKey": "abc", "timestamp": 1, "whatever": [1, 2]}
        decoded = from_json(raw)
        assert isinstance(decoded, UnknownTransaction)
        assert decoded.type_id == 99
        assert decoded.to_json() == raw
        assert decoded.timestamp_ms == 1
        assert not decoded.proofs.is_signed
        with pytest.raises(EncodingError):
            decoded.body_bytes()

    def test_exchange_type_is_dispatched(self):
        assert lookup_transaction_class(7) is ExchangeTransaction

    def test_unregistered_type_is_unknown(self):
        assert isinstance(from_json({"type": 15}), UnknownTransaction)

    def test_missing_type(self):
        with pytest.raises(DecodingError) as exc_info:
            from_json({"fee": 1})
        assert exc_info.value.code == ErrorCode.MISSING_FIELD

    def test_not_an_object(self):
        with pytest.raises(DecodingError):
            from_json([1, 2])

    def test_missing_field(self, signer, asset_id, timestamp_ms):
        data = make_burn_transaction(signer, asset_id, 100, 500000, timestamp=timestamp_ms).to_json()
        del data["fee"]
        with pytest.raises(DecodingError) as exc_info:
            from_json(data)
        assert exc_info.value.details == {"field": "fee"}

    def test_bad_base58(self, signer, asset_id, timestamp_ms):
        data = make_burn_transaction(signer, asset_id, 100, 500000, timestamp=timestamp_ms).to_json()
        data["senderPublicKey"] = "0OIl"
        with pytest.raises(DecodingError) as exc_info:
            from_json(data)
        assert exc_info.value.code == ErrorCode.INVALID_IDENTIFIER


@pytest.mark.unit
class TestFieldVariants:
    """Alternate spellings accepted on decode."""

    def test_legacy_signature_lands_in_slot_zero(self, signer, address, timestamp_ms):
        tx = make_transfer_transaction(signer, address, 5, None, 100000, timestamp=timestamp_ms)
        decoded = from_json(tx.to_json())
        assert decoded.proofs[0] == tx.proofs[0]
        assert decoded.proofs.last_index() == 0

    def test_proofs_with_gap(self, signer, other_signer, timestamp_ms):
        tx = make_data_transaction(signer, [("k", 1)], 100000, timestamp=timestamp_ms)
        tx.sign(other_signer, proof_index=2)
        decoded = from_json(tx.to_json())
        assert isinstance(decoded, DataTransaction)
        assert decoded.proofs[1] is None
        assert decoded.verify_proof(other_signer.public_key, proof_index=2)

    def test_native_asset_absent_or_null(self, signer, address, timestamp_ms):
        data = make_transfer_transaction(signer, address, 5, None, 100000, timestamp=timestamp_ms).to_json()
        del data["assetId"]
        del data["feeAssetId"]
        decoded = from_json(data)
        assert isinstance(decoded, TransferTransaction)
        assert decoded.asset_id is None
        assert decoded.fee_asset_id is None

    def test_burn_amount_key(self, signer, asset_id, timestamp_ms):
        data = make_burn_transaction(signer, asset_id, 100, 500000, timestamp=timestamp_ms).to_json()
        data["amount"] = data.pop("quantity")
        assert from_json(data).amount == 100

    def test_numeric_strings(self, signer, asset_id, timestamp_ms):
        data = make_burn_transaction(signer, asset_id, 100, 500000, timestamp=timestamp_ms).to_json()
        data["fee"] = "500000"
        assert from_json(data).fee == 500000

    def test_alias_chain_id_from_payload(self, signer, timestamp_ms):
        data = make_alias_transaction(signer, "carol", 100000, timestamp=timestamp_ms).to_json()
        data["chainId"] = "T"
        decoded = from_json(data)
        assert isinstance(decoded, AliasTransaction)
        assert decoded.chain_id == "T"

    def test_set_script_chain_id_as_text(self, signer, timestamp_ms):
        data = make_set_script_transaction(signer, None, 1000000, timestamp=timestamp_ms).to_json()
        data["chainId"] = "W"
        decoded = from_json(data)
        assert isinstance(decoded, SetScriptTransaction)
        assert decoded.script is None

    def test_sponsorship_cancel_null(self, signer, asset_id, timestamp_ms):
        data = make_sponsored_fee_transaction(signer, asset_id, 0, 100000000, timestamp=timestamp_ms).to_json()
        decoded = from_json(data)
        assert isinstance(decoded, SponsoredFeeTransaction)
        assert decoded.min_sponsored_asset_fee == 0

    def test_unsupported_data_entry_type(self, signer, timestamp_ms):
        data = make_data_transaction(signer, [("k", 1)], 100000, timestamp=timestamp_ms).to_json()
        data["data"][0]["type"] = "string"
        with pytest.raises(DecodingError):
            from_json(data)

    def test_base64_binary_entry(self, signer, timestamp_ms):
        data = make_data_transaction(signer, [("x", b"\x01")], 100000, timestamp=timestamp_ms).to_json()
        data["data"][0]["value"] = "base64:AQ=="
        decoded = from_json(data)
        assert decoded.entries[0].value == b"\x01"
        assert decoded.verify_proof()

    def test_alias_keeps_chain_id(self, signer, timestamp_ms):
        tx = make_alias_transaction(signer, "bob", 100000, config=TESTNET, timestamp=timestamp_ms)
        out = tx.to_json()
        assert out["chainId"] == ord("T")
        decoded = from_json(out)
        assert decoded.chain_id == "T"
        assert decoded.body_bytes() == tx.body_bytes()
        assert decoded.verify_proof()

    def test_alias_chain_id_from_sender_address(self, signer, timestamp_ms):
        tx = make_alias_transaction(signer, "bob", 100000, config=TESTNET, timestamp=timestamp_ms)
        data = tx.to_json()
        del data["chainId"]
        data["sender"] = b58encode(bytes([1, ord("T")]) + b"\x00" * 24)
        decoded = from_json(data)
        assert decoded.chain_id == "T"
        assert decoded.verify_proof()

    def test_exchange_order1_order2(self, signer, order_pair, timestamp_ms):
        buy, sell = order_pair
        tx = make_exchange_transaction(signer, buy, sell, 150, 1000, 300000, 300000, 300000,
                                       timestamp=timestamp_ms)
        data = tx.to_json()
        data["order1"] = data.pop("sellOrder")
        data["order2"] = data.pop("buyOrder")
        decoded = from_json(data)
        assert isinstance(decoded, ExchangeTransaction)
        assert decoded == tx
        assert decoded.verify_proof()

    def test_exchange_order_not_an_object(self, signer, order_pair, timestamp_ms):
        tx = make_exchange_transaction(signer, *order_pair, 150, 1000, 300000, 300000, 300000,
                                       timestamp=timestamp_ms)
        data = tx.to_json()
        data["buyOrder"] = "nope"
        with pytest.raises(DecodingError) as exc_info:
            from_json(data)
        assert exc_info.value.details == {"field": "buyOrder"}
