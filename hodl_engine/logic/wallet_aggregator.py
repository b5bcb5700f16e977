# hodl_engine/logic/wallet_aggregator.py

import logging
from decimal import Decimal, InvalidOperation
from functools import reduce
from typing import Any, Iterable, Iterator, Optional, Tuple

from hodl_engine.core.enums.transaction_kind import TransactionKind
from hodl_engine.core.exceptions import MalformedTransactionError
from hodl_engine.core.models.transaction import Transaction
from hodl_engine.core.models.wallet import Wallet, WalletEntry
from hodl_engine.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _qualifying(transactions: Iterable[Transaction]) -> Iterator[Tuple[int, Transaction]]:
    """Lazily yields (position, transaction) for Buy records only."""
    for index, transaction in enumerate(transactions):
        if transaction.kind == TransactionKind.BUY.value:
            yield index, transaction
        elif TransactionKind.is_valid(transaction.kind):
            logger.debug(f"Aggregator: Skipping record {index} of kind '{transaction.kind}'.")
        else:
            logger.debug(f"Aggregator: Skipping record {index} of unrecognised kind '{transaction.kind}'.")


def aggregate(
    transactions: Iterable[Transaction],
    error_reporter: Optional[ErrorReporter] = None
) -> Wallet:
    """
    Folds an ordered ledger into per-asset wallet entries.

    Only 'Buy' records count. Each step produces a new mapping, so the returned
    wallet is the only state that ever leaves this function.

    A record whose quantity or price is not a number raises
    MalformedTransactionError. When an error_reporter is given, the error is
    reported there instead and the record is skipped.
    """
    def step(wallet: Wallet, item: Tuple[int, Transaction]) -> Wallet:
        index, transaction = item
        try:
            quantity = _to_decimal(transaction.quantity)
            price = _to_decimal(transaction.price)
        except (InvalidOperation, ValueError, TypeError) as e:
            error = MalformedTransactionError(
                record_index=index,
                asset=transaction.asset,
                reason=f"quantity and price must be numbers ({type(e).__name__})"
            )
            if error_reporter is None:
                raise error from e
            logger.warning(f"Aggregator: Skipping malformed record {index}: {error.reason}")
            error_reporter.add_malformed(error)
            return wallet

        entry = wallet.get(transaction.asset, WalletEntry()).record(quantity, price)
        logger.debug(f"Aggregator: {transaction.asset} total={entry.total}, purchases={len(entry.purchases)}, cost_basis={entry.cost_basis}")
        return {**wallet, transaction.asset: entry}

    wallet = reduce(step, _qualifying(transactions), {})
    logger.debug(f"Aggregator: Built wallet with {len(wallet)} assets.")
    return wallet
