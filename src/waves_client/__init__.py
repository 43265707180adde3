"""
Waves Python Client - transaction codec and signing engine

Builds the canonical byte bodies of Waves transactions and matcher orders,
signs them, and converts them to and from the node's JSON format.
"""

from .enums import *
from .runtime.errors import *
from .runtime.config import ChainConfig, MAINNET, TESTNET, get_default_config, set_default_config
from .codec import BinaryReader, BinaryWriter, b58decode, b58encode
from .crypto import Ed25519PrivateKey, Ed25519PublicKey
from .signers import Signer, Ed25519Signer, Curve25519Signer, sign_message, verify_curve25519, verify_signature
from .tx import *

__version__ = "0.3.0"
__all__ = [
    # Enums
    "TransactionType",
    "DataEntryType",
    "OrderType",

    # Errors
    "ErrorCode",
    "WavesError",
    "EncodingError",
    "SigningError",
    "ProofPolicyError",
    "DecodingError",

    # Configuration
    "ChainConfig",
    "MAINNET",
    "TESTNET",
    "get_default_config",
    "set_default_config",

    # Codec
    "BinaryReader",
    "BinaryWriter",
    "b58decode",
    "b58encode",

    # Keys and signing
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "Signer",
    "Ed25519Signer",
    "Curve25519Signer",
    "sign_message",
    "verify_signature",
    "verify_curve25519",

    # Models
    "Signable",
    "Transaction",
    "Proofs",
    "MAX_PROOFS",
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

    # Builders
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
