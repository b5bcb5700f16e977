# hodl_engine/api/v1/portfolio.py

from fastapi import APIRouter, Depends, HTTPException
from hodl_engine.core.config.settings import settings
from hodl_engine.core.exceptions import MalformedTransactionError
from hodl_engine.core.models.request import PortfolioReportRequest
from hodl_engine.core.models.response import PortfolioReportResponse
from hodl_engine.logic.error_reporter import ErrorReporter
from hodl_engine.logic.parser import LedgerParser
from hodl_engine.services.portfolio_reporter import PortfolioReporter
from hodl_engine.services.price_client import CoinMarketCapPriceClient, PriceClient

router = APIRouter()

def get_price_client() -> PriceClient:
    """
    Provides the market data client configured in settings.
    """
    return CoinMarketCapPriceClient(
        api_key=settings.COIN_MARKET_CAP_API_KEY,
        base_url=settings.PRICE_API_BASE_URL,
        timeout=settings.PRICE_REQUEST_TIMEOUT
    )

def get_portfolio_reporter(price_client: PriceClient = Depends(get_price_client)) -> PortfolioReporter:
    """
    Provides a new PortfolioReporter per request, so no wallet or error
    state is shared between requests.
    """
    error_reporter = ErrorReporter()
    return PortfolioReporter(
        parser=LedgerParser(error_reporter=error_reporter, strict=settings.STRICT_MODE),
        price_client=price_client,
        error_reporter=error_reporter,
        strict=settings.STRICT_MODE
    )

@router.post(
    "/portfolio/report",
    response_model=PortfolioReportResponse,
    summary="Build a cost basis and unrealized gain report",
    description="Aggregates 'Buy' ledger records into per-asset holdings with a mean "
                "purchase price cost basis, then values each holding against current USD quotes."
)
def portfolio_report_endpoint(
    request: PortfolioReportRequest,
    reporter: PortfolioReporter = Depends(get_portfolio_reporter)
) -> PortfolioReportResponse:
    """
    API endpoint to build a portfolio valuation report.
    """
    try:
        return reporter.generate_report(
            raw_transactions=request.transactions,
            ledger_csv=request.ledger_csv,
            prices=request.prices
        )
    except MalformedTransactionError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "record_index": e.record_index, "asset": e.asset, "error_reason": e.reason}
        )
