"""
Builders: construct, encode and sign in one call.

Each ``make_*`` function builds the model from typed parameters, computes its
body (raising EncodingError before anything is signed) and stores the
signature in proof slot 0.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

from ..codec.base58 import b58decode
from ..enums import OrderType
from ..runtime.config import ChainConfig, get_default_config
from ..signers.signer import Signer
from .alias import AliasTransaction
from .assets import BurnTransaction, IssueTransaction, ReissueTransaction, SponsoredFeeTransaction
from .data import DataEntry, DataTransaction
from .exchange import ExchangeTransaction
from .leasing import LeaseCancelTransaction, LeaseTransaction
from .orders import AssetPair, Order, OrderCancel
from .scripts import SetScriptTransaction
from .transfers import MassTransferTransaction, TransferItem, TransferTransaction

Timestamp = Union[datetime, int, None]


def _common(signer: Signer, fee: int, timestamp: Timestamp) -> dict:
    kwargs = {"sender_public_key": signer.public_key, "fee": fee}
    if timestamp is not None:
        kwargs["timestamp"] = timestamp
    return kwargs


def make_issue_transaction(signer: Signer, name: str, description: str, quantity: int,
                           decimals: int, reissuable: bool, fee: int,
                           timestamp: Timestamp = None) -> IssueTransaction:
    return IssueTransaction(
        **_common(signer, fee, timestamp),
        name=name, description=description or "", quantity=quantity,
        decimals=decimals, reissuable=reissuable,
    ).sign(signer)


def make_reissue_transaction(signer: Signer, asset_id: str, quantity: int, reissuable: bool,
                             fee: int, timestamp: Timestamp = None) -> ReissueTransaction:
    return ReissueTransaction(
        **_common(signer, fee, timestamp),
        asset_id=asset_id, quantity=quantity, reissuable=reissuable,
    ).sign(signer)


def make_transfer_transaction(signer: Signer, recipient: str, amount: int, asset_id: Optional[str],
                              fee: int, fee_asset_id: Optional[str] = None,
                              attachment: Union[str, bytes, None] = None,
                              timestamp: Timestamp = None) -> TransferTransaction:
    """
    Transfer ``amount`` to ``recipient``.

    Args:
        asset_id: Asset to send, ``None`` for the native asset
        fee_asset_id: Asset the fee is paid in, ``None`` for the native asset
        attachment: Text (stored as UTF-8) or raw bytes
    """
    return TransferTransaction(
        **_common(signer, fee, timestamp),
        recipient=recipient, amount=amount, asset_id=asset_id or None,
        fee_asset_id=fee_asset_id or None, attachment=attachment,
    ).sign(signer)


def make_burn_transaction(signer: Signer, asset_id: str, amount: int, fee: int,
                          timestamp: Timestamp = None) -> BurnTransaction:
    return BurnTransaction(
        **_common(signer, fee, timestamp), asset_id=asset_id, amount=amount,
    ).sign(signer)


def make_lease_transaction(signer: Signer, recipient: str, amount: int, fee: int,
                           timestamp: Timestamp = None) -> LeaseTransaction:
    return LeaseTransaction(
        **_common(signer, fee, timestamp), recipient=recipient, amount=amount,
    ).sign(signer)


def make_lease_cancel_transaction(signer: Signer, lease_id: str, fee: int,
                                  timestamp: Timestamp = None) -> LeaseCancelTransaction:
    return LeaseCancelTransaction(
        **_common(signer, fee, timestamp), lease_id=lease_id,
    ).sign(signer)


def make_alias_transaction(signer: Signer, alias: str, fee: int,
                           config: Optional[ChainConfig] = None,
                           timestamp: Timestamp = None) -> AliasTransaction:
    config = config or get_default_config()
    return AliasTransaction(
        **_common(signer, fee, timestamp), alias=alias, chain_id=config.chain_id,
    ).sign(signer)


def make_data_transaction(signer: Signer,
                          entries: Sequence[Union[DataEntry, Tuple[str, Any]]],
                          fee: int, timestamp: Timestamp = None) -> DataTransaction:
    """
    Store ``entries`` in the given order.

    Raises:
        EncodingError: If ``entries`` is a mapping or holds a value that is
            not int, bool or bytes
    """
    return DataTransaction(
        **_common(signer, fee, timestamp), entries=entries,
    ).sign(signer)


def make_mass_transfer_transaction(signer: Signer,
                                   transfers: Iterable[Union[TransferItem, Tuple[str, int]]],
                                   asset_id: Optional[str], fee: int,
                                   attachment: Union[str, bytes, None] = None,
                                   timestamp: Timestamp = None) -> MassTransferTransaction:
    return MassTransferTransaction(
        **_common(signer, fee, timestamp),
        transfers=list(transfers), asset_id=asset_id or None, attachment=attachment,
    ).sign(signer)


def make_set_script_transaction(signer: Signer, script: Optional[bytes], fee: int,
                                config: Optional[ChainConfig] = None,
                                timestamp: Timestamp = None) -> SetScriptTransaction:
    config = config or get_default_config()
    return SetScriptTransaction(
        **_common(signer, fee, timestamp), script=script, chain_id=config.chain_id,
    ).sign(signer)


def make_sponsored_fee_transaction(signer: Signer, asset_id: str, min_sponsored_asset_fee: int,
                                   fee: int, timestamp: Timestamp = None) -> SponsoredFeeTransaction:
    return SponsoredFeeTransaction(
        **_common(signer, fee, timestamp),
        asset_id=asset_id, min_sponsored_asset_fee=min_sponsored_asset_fee or 0,
    ).sign(signer)


def make_exchange_transaction(signer: Signer, buy_order: Order, sell_order: Order, price: int,
                              amount: int, buy_matcher_fee: int, sell_matcher_fee: int, fee: int,
                              timestamp: Timestamp = None) -> ExchangeTransaction:
    """
    Settle two signed orders; ``signer`` is the matcher.

    Raises:
        SigningError: If either order is not signed
        EncodingError: If the orders are not a buy and a sell
    """
    return ExchangeTransaction(
        **_common(signer, fee, timestamp),
        buy_order=buy_order, sell_order=sell_order, price=price, amount=amount,
        buy_matcher_fee=buy_matcher_fee, sell_matcher_fee=sell_matcher_fee,
    ).sign(signer)


def make_order(signer: Signer, matcher_public_key: str, order_type: Union[OrderType, str],
               amount_asset_id: Optional[str], price_asset_id: Optional[str],
               price: int, amount: int, expiration: int, matcher_fee: int,
               timestamp: Timestamp = None) -> Order:
    """
    Place a limit order.

    Args:
        matcher_public_key: Matcher key as base58 text
        expiration: Expiry as epoch milliseconds
    """
    kwargs = {}
    if timestamp is not None:
        kwargs["timestamp"] = timestamp
    return Order(
        sender_public_key=signer.public_key,
        matcher_public_key=b58decode(matcher_public_key),
        asset_pair=AssetPair(amount_asset=amount_asset_id or None, price_asset=price_asset_id or None),
        order_type=order_type,
        price=price, amount=amount, expiration=expiration, matcher_fee=matcher_fee,
        **kwargs,
    ).sign(signer)


def make_order_cancel(signer: Signer, order_id: str) -> OrderCancel:
    return OrderCancel(sender_public_key=signer.public_key, order_id=order_id).sign(signer)
