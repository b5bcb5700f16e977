# hodl_engine/logic/valuation_reporter.py

import logging
from decimal import Decimal
from typing import Mapping, Union

from hodl_engine.core.enums.valuation_status import ValuationStatus, GainOrLoss
from hodl_engine.core.exceptions import MissingPriceError
from hodl_engine.core.models.prices import PriceSnapshot
from hodl_engine.core.models.report import ReportRow, PortfolioTotals
from hodl_engine.core.models.wallet import Wallet, WalletEntry

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


def classify(percent_change: Decimal) -> GainOrLoss:
    """
    GAIN only for a strictly positive change. Zero and NaN are LOSS.
    """
    # Ordering comparisons on a Decimal NaN raise InvalidOperation
    if percent_change.is_nan():
        return GainOrLoss.LOSS
    return GainOrLoss.GAIN if percent_change > 0 else GainOrLoss.LOSS


def _value_entry(symbol: str, entry: WalletEntry, snapshot: PriceSnapshot) -> ReportRow:
    amount = entry.total
    cost_basis = entry.cost_basis
    cost = amount * cost_basis

    try:
        price = snapshot.price_for(symbol)
    except MissingPriceError as e:
        logger.warning(f"Valuation: {e.message}")
        return ReportRow(
            symbol=symbol,
            amount=amount,
            cost_basis=cost_basis,
            cost=cost,
            status=ValuationStatus.UNPRICED,
            unavailable_reason=e.message
        )

    if not entry.purchases or cost_basis == 0:
        logger.debug(f"Valuation: {symbol} has a zero cost basis; percent change is undefined.")
        return ReportRow(
            symbol=symbol,
            price=price,
            amount=amount,
            cost_basis=cost_basis,
            cost=cost,
            value=amount * price,
            percent_change=Decimal("NaN"),
            gain_or_loss=GainOrLoss.LOSS,
            status=ValuationStatus.ZERO_COST_BASIS
        )

    percent_change = (price - cost_basis) / cost_basis * HUNDRED
    return ReportRow(
        symbol=symbol,
        price=price,
        amount=amount,
        cost_basis=cost_basis,
        cost=cost,
        value=amount * price,
        percent_change=percent_change,
        gain_or_loss=classify(percent_change),
        status=ValuationStatus.PRICED
    )


def report(
    wallet: Wallet,
    prices: Union[PriceSnapshot, Mapping[str, Decimal]]
) -> list[ReportRow]:
    """
    Values every wallet entry against a price snapshot, one row per asset in
    wallet order. Assets without a quote still get a row, marked UNPRICED.
    """
    snapshot = prices if isinstance(prices, PriceSnapshot) else PriceSnapshot.of(prices)
    return [_value_entry(symbol, entry, snapshot) for symbol, entry in wallet.items()]


def summarize(rows: list[ReportRow]) -> PortfolioTotals:
    """
    Sums cost over all rows and market value over the priced rows.
    """
    totals = PortfolioTotals()
    for row in rows:
        totals.total_cost += row.cost
        if row.value is None:
            totals.unpriced_assets += 1
        else:
            totals.total_value += row.value
            totals.priced_assets += 1
    return totals
