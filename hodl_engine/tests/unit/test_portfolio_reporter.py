# hodl_engine/tests/unit/test_portfolio_reporter.py

import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from hodl_engine.services.portfolio_reporter import PortfolioReporter
from hodl_engine.services.price_client import CoinMarketCapPriceClient
from hodl_engine.logic.error_reporter import ErrorReporter
from hodl_engine.logic.parser import LedgerParser
from hodl_engine.core.enums.valuation_status import ValuationStatus
from hodl_engine.core.exceptions import MalformedTransactionError
from hodl_engine.core.models.prices import PriceSnapshot

@pytest.fixture
def error_reporter():
    return ErrorReporter()

@pytest.fixture
def mock_price_client():
    """Mock price client so no network call is made."""
    return MagicMock(spec=CoinMarketCapPriceClient)

@pytest.fixture
def reporter(error_reporter, mock_price_client):
    return PortfolioReporter(
        parser=LedgerParser(error_reporter=error_reporter),
        price_client=mock_price_client,
        error_reporter=error_reporter
    )

LEDGER = [
    {"kind": "Buy", "asset": "BTC", "quantity": "1", "price": "100"},
    {"kind": "Sell", "asset": "BTC", "quantity": "1", "price": "999"},
    {"kind": "Buy", "asset": "BTC", "quantity": "1", "price": "300"},
    {"kind": "Buy", "asset": "SOL", "quantity": "5", "price": "20"},
]

def test_generate_report_fetches_prices_for_wallet_assets(reporter, mock_price_client):
    mock_price_client.get_prices.return_value = PriceSnapshot.of({"BTC": Decimal("400")})

    response = reporter.generate_report(raw_transactions=LEDGER)

    requested = list(mock_price_client.get_prices.call_args.args[0])
    assert requested == ["BTC", "SOL"]
    btc, sol = response.rows
    assert btc.cost == Decimal("400")
    assert btc.value == Decimal("800")
    assert btc.percent_change == Decimal("100")
    assert sol.status == ValuationStatus.UNPRICED
    assert sol.cost == Decimal("100")
    assert response.totals.total_cost == Decimal("500")
    assert response.price_source_error is None
    assert response.errored_transactions == []

def test_generate_report_explicit_prices_skip_client(reporter, mock_price_client):
    response = reporter.generate_report(raw_transactions=LEDGER, prices={"BTC": Decimal("400"), "SOL": Decimal("10")})

    mock_price_client.get_prices.assert_not_called()
    assert [row.status for row in response.rows] == [ValuationStatus.PRICED, ValuationStatus.PRICED]

def test_generate_report_price_source_failure(reporter, mock_price_client):
    mock_price_client.get_prices.return_value = PriceSnapshot.failed("ConnectError: timed out")

    response = reporter.generate_report(raw_transactions=LEDGER)

    assert response.price_source_error == "ConnectError: timed out"
    assert all(row.status == ValuationStatus.UNPRICED for row in response.rows)
    assert response.totals.unpriced_assets == 2

def test_generate_report_collects_malformed_records(reporter, mock_price_client, error_reporter):
    mock_price_client.get_prices.return_value = PriceSnapshot.of({"BTC": Decimal("400")})
    ledger = LEDGER + [{"kind": "Buy", "asset": "ETH", "quantity": "one", "price": "10"}]

    response = reporter.generate_report(raw_transactions=ledger)

    assert [row.symbol for row in response.rows] == ["BTC", "SOL"]
    assert len(response.errored_transactions) == 1
    assert response.errored_transactions[0].record_index == 4
    assert response.errored_transactions[0].asset == "ETH"
    # Reporter is cleared for the next run
    assert error_reporter.has_errors() is False

def test_generate_report_from_csv(reporter, mock_price_client):
    mock_price_client.get_prices.return_value = PriceSnapshot.of({"ETH": Decimal("3000")})
    content = (
        "Timestamp,Transaction Type,Asset,Quantity Transacted,Spot Price Currency,Spot Price at Transaction\n"
        "2021-01-01T00:00:00Z,Buy,ETH,2,USD,1000\n"
        "2021-03-01T00:00:00Z,Buy,ETH,1,USD,2000\n"
    )

    response = reporter.generate_report(ledger_csv=content)

    row = response.rows[0]
    assert row.amount == Decimal("3")
    assert row.cost_basis == Decimal("1500")
    assert row.percent_change == Decimal("100")

def test_generate_report_empty_ledger(reporter, mock_price_client):
    mock_price_client.get_prices.return_value = PriceSnapshot.of({})

    response = reporter.generate_report(raw_transactions=[])

    assert response.rows == []
    assert response.totals.total_cost == Decimal("0")

def test_generate_report_strict_mode_raises(error_reporter, mock_price_client):
    strict_reporter = PortfolioReporter(
        parser=LedgerParser(error_reporter=error_reporter, strict=True),
        price_client=mock_price_client,
        error_reporter=error_reporter,
        strict=True
    )
    ledger = LEDGER + [{"kind": "Buy", "asset": "ETH", "quantity": "1", "price": "ten"}]

    with pytest.raises(MalformedTransactionError):
        strict_reporter.generate_report(raw_transactions=ledger)

    mock_price_client.get_prices.assert_not_called()
