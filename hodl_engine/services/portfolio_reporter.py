# hodl_engine/services/portfolio_reporter.py

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional

from hodl_engine.core.models.prices import PriceSnapshot
from hodl_engine.core.models.response import PortfolioReportResponse
from hodl_engine.logic.error_reporter import ErrorReporter
from hodl_engine.logic.parser import LedgerParser
from hodl_engine.logic.valuation_reporter import report, summarize
from hodl_engine.logic.wallet_aggregator import aggregate
from hodl_engine.services.price_client import PriceClient

logger = logging.getLogger(__name__)

class PortfolioReporter:
    """
    Orchestrates one report run: parse the ledger, fold it into a wallet,
    resolve prices and value each holding.
    """
    def __init__(
        self,
        parser: LedgerParser,
        price_client: PriceClient,
        error_reporter: ErrorReporter,
        strict: bool = False
    ):
        self._parser = parser
        self._price_client = price_client
        self._error_reporter = error_reporter
        self._strict = strict

    def generate_report(
        self,
        raw_transactions: Optional[list[dict[str, Any]]] = None,
        ledger_csv: Optional[str] = None,
        prices: Optional[Mapping[str, Decimal]] = None
    ) -> PortfolioReportResponse:
        """
        Builds the valuation report. Explicit prices bypass the price client.

        Malformed records are skipped and listed in errored_transactions, unless
        the reporter is strict, in which case the first one is raised.
        """
        try:
            if ledger_csv is not None:
                transactions = self._parser.parse_csv(ledger_csv)
            else:
                transactions = self._parser.parse_records(raw_transactions or [])
            logger.info(f"Starting portfolio report over {len(transactions)} transactions.")

            wallet = aggregate(transactions, error_reporter=None if self._strict else self._error_reporter)

            if prices is not None:
                snapshot = PriceSnapshot.of(prices)
            else:
                snapshot = self._price_client.get_prices(wallet.keys())

            rows = report(wallet, snapshot)
            totals = summarize(rows)
            errored = self._error_reporter.get_errors()
            logger.info(f"Finished portfolio report. {len(rows)} assets valued, {totals.unpriced_assets} unpriced, {len(errored)} records skipped.")

            return PortfolioReportResponse(
                rows=rows,
                totals=totals,
                errored_transactions=errored,
                price_source_error=snapshot.error_reason
            )
        finally:
            self._error_reporter.clear()
