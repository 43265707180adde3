"""
Transaction and order models for the Waves ledger.

Each model owns its binary body layout and its JSON projection; ``from_json``
in the registry dispatches node JSON to the right model.
"""

from .base import Signable, Transaction
from .proofs import MAX_PROOFS, Proofs, render_proofs
from .assets import IssueTransaction, ReissueTransaction, BurnTransaction, SponsoredFeeTransaction
from .transfers import TransferTransaction, MassTransferTransaction, TransferItem
from .leasing import LeaseTransaction, LeaseCancelTransaction
from .alias import AliasTransaction
from .data import DataEntry, DataTransaction
from .exchange import ExchangeTransaction
from .scripts import SetScriptTransaction
from .orders import AssetPair, Order, OrderCancel
from .unknown import UnknownTransaction
from .registry import AnyTransaction, TRANSACTION_REGISTRY, from_json, list_transaction_types, lookup_transaction_class
from .builders import (
    make_issue_transaction,
    make_reissue_transaction,
    make_transfer_transaction,
    make_burn_transaction,
    make_lease_transaction,
    make_lease_cancel_transaction,
    make_alias_transaction,
    make_data_transaction,
    make_mass_transfer_transaction,
    make_set_script_transaction,
    make_sponsored_fee_transaction,
    make_exchange_transaction,
    make_order,
    make_order_cancel,
)

__all__ = [
    "Signable",
    "Transaction",
    "MAX_PROOFS",
    "Proofs",
    "render_proofs",
    "IssueTransaction",
    "ReissueTransaction",
    "BurnTransaction",
    "SponsoredFeeTransaction",
    "TransferTransaction",
    "MassTransferTransaction",
    "TransferItem",
    "LeaseTransaction",
    "LeaseCancelTransaction",
    "AliasTransaction",
    "DataEntry",
    "DataTransaction",
    "ExchangeTransaction",
    "SetScriptTransaction",
    "AssetPair",
    "Order",
    "OrderCancel",
    "UnknownTransaction",
    "AnyTransaction",
    "TRANSACTION_REGISTRY",
    "from_json",
    "list_transaction_types",
    "lookup_transaction_class",
    "make_issue_transaction",
    "make_reissue_transaction",
    "make_transfer_transaction",
    "make_burn_transaction",
    "make_lease_transaction",
    "make_lease_cancel_transaction",
    "make_alias_transaction",
    "make_data_transaction",
    "make_mass_transfer_transaction",
    "make_set_script_transaction",
    "make_sponsored_fee_transaction",
    "make_exchange_transaction",
    "make_order",
    "make_order_cancel",
]
