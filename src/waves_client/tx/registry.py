"""
Transaction type registry.

Maps the integer ``type`` of node JSON to the model that decodes it. Every
TransactionType must have an entry; anything else decodes to
UnknownTransaction so newer transaction kinds can still be read.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Type, Union

from ..enums import TransactionType
from ..runtime.errors import DecodingError, ErrorCode
from .alias import AliasTransaction
from .assets import BurnTransaction, IssueTransaction, ReissueTransaction, SponsoredFeeTransaction
from .base import Transaction
from .data import DataTransaction
from .exchange import ExchangeTransaction
from .leasing import LeaseCancelTransaction, LeaseTransaction
from .scripts import SetScriptTransaction
from .transfers import MassTransferTransaction, TransferTransaction
from .unknown import UnknownTransaction

logger = logging.getLogger(__name__)

AnyTransaction = Union[
    IssueTransaction,
    ReissueTransaction,
    TransferTransaction,
    BurnTransaction,
    ExchangeTransaction,
    LeaseTransaction,
    LeaseCancelTransaction,
    AliasTransaction,
    MassTransferTransaction,
    DataTransaction,
    SetScriptTransaction,
    SponsoredFeeTransaction,
    UnknownTransaction,
]

TRANSACTION_REGISTRY: Dict[TransactionType, Type[Transaction]] = {
    TransactionType.ISSUE: IssueTransaction,
    TransactionType.TRANSFER: TransferTransaction,
    TransactionType.REISSUE: ReissueTransaction,
    TransactionType.BURN: BurnTransaction,
    TransactionType.EXCHANGE: ExchangeTransaction,
    TransactionType.LEASE: LeaseTransaction,
    TransactionType.LEASE_CANCEL: LeaseCancelTransaction,
    TransactionType.ALIAS: AliasTransaction,
    TransactionType.MASS_TRANSFER: MassTransferTransaction,
    TransactionType.DATA: DataTransaction,
    TransactionType.SET_SCRIPT: SetScriptTransaction,
    TransactionType.SPONSOR_FEE: SponsoredFeeTransaction,
}

_unregistered = set(TransactionType) - set(TRANSACTION_REGISTRY)
if _unregistered:
    raise RuntimeError(f"Transaction types without a model: {sorted(t.name for t in _unregistered)}")

for _type, _cls in TRANSACTION_REGISTRY.items():
    if _cls.TYPE is not _type:
        raise RuntimeError(f"{_cls.__name__} is registered for {_type.name} but declares {_cls.TYPE.name}")


def lookup_transaction_class(type_id: Any) -> Type[Transaction]:
    """
    Model class for a type discriminant.

    Raises:
        KeyError: If the type is not registered
    """
    if isinstance(type_id, bool) or not isinstance(type_id, int):
        raise KeyError(type_id)
    return TRANSACTION_REGISTRY[TransactionType(type_id)]


def from_json(data: Mapping[str, Any]) -> AnyTransaction:
    """
    Decode node JSON into the matching transaction model.

    Args:
        data: Parsed JSON object of one transaction

    Returns:
        Typed transaction, or UnknownTransaction for unregistered types

    Raises:
        DecodingError: If ``data`` is not an object, has no ``type``, or a
            field of a known type is missing or malformed
    """
    if not isinstance(data, Mapping):
        raise DecodingError("Transaction JSON must be an object", ErrorCode.INVALID_FIELD)
    type_id = data.get("type")
    if type_id is None:
        raise DecodingError("Missing required field 'type'", ErrorCode.MISSING_FIELD,
                            details={"field": "type"})
    try:
        cls = lookup_transaction_class(type_id)
    except (KeyError, ValueError):
        logger.warning(f"Unknown transaction type {type_id!r}, keeping raw fields")
        return UnknownTransaction.from_json(data)
    logger.debug(f"Decoding {cls.__name__} from JSON")
    return cls.from_json(data)


def list_transaction_types() -> Dict[int, str]:
    """Registered type ids and their model names."""
    return {int(t): cls.__name__ for t, cls in TRANSACTION_REGISTRY.items()}
