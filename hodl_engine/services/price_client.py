# hodl_engine/services/price_client.py

import logging
from decimal import Decimal
from typing import Iterable, Optional, Protocol

import httpx
from pydantic import BaseModel, ValidationError

from hodl_engine.core.exceptions import PriceSourceError
from hodl_engine.core.models.prices import PriceSnapshot, QUOTE_CURRENCY

logger = logging.getLogger(__name__)

QUOTES_PATH = "/v1/cryptocurrency/quotes/latest"
API_KEY_HEADER = "X-CMC_PRO_API_KEY"


class PriceClient(Protocol):
    """
    Protocol for market data sources used by the portfolio reporter.
    """
    def get_prices(self, symbols: Iterable[str]) -> PriceSnapshot:
        """
        Returns a snapshot of USD quotes. Symbols without a quote are omitted;
        a source-wide failure is returned as PriceSnapshot.failed, never raised.
        """
        ...


# --- CoinMarketCap response shapes ---

class _UsdQuote(BaseModel):
    price: Optional[Decimal] = None # null for assets without an active market

class _Quote(BaseModel):
    USD: _UsdQuote

class _CurrencyQuote(BaseModel):
    quote: _Quote

class _QuotesResponse(BaseModel):
    data: dict[str, _CurrencyQuote]


class CoinMarketCapPriceClient:
    """
    Fetches latest USD quotes from the CoinMarketCap pro API.
    """
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def get_prices(self, symbols: Iterable[str]) -> PriceSnapshot:
        symbols = list(dict.fromkeys(symbols))
        if not symbols:
            return PriceSnapshot.of({})

        try:
            prices = self._fetch(symbols)
        except PriceSourceError as e:
            logger.error(f"Price source failure for {symbols}: {e.reason}")
            return PriceSnapshot.failed(e.reason)

        missing = [symbol for symbol in symbols if symbol not in prices]
        if missing:
            logger.warning(f"Price source returned no quote for: {', '.join(missing)}")
        return PriceSnapshot.of(prices)

    def _fetch(self, symbols: list[str]) -> dict[str, Decimal]:
        if not self._api_key:
            raise PriceSourceError("CoinMarketCap API key not configured")

        client = self._http_client or httpx.Client(timeout=self._timeout)
        try:
            response = client.get(
                f"{self._base_url}{QUOTES_PATH}",
                params={"symbol": ",".join(symbols)},
                headers={API_KEY_HEADER: self._api_key}
            )
            response.raise_for_status()
            payload = _QuotesResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise PriceSourceError(f"{type(e).__name__}: {e}") from e
        except (ValidationError, ValueError) as e:
            raise PriceSourceError(f"Unexpected quotes payload: {e}") from e
        finally:
            if self._http_client is None:
                client.close()

        prices: dict[str, Decimal] = {}
        for symbol, currency in payload.data.items():
            quote = getattr(currency.quote, QUOTE_CURRENCY)
            if quote.price is not None:
                prices[symbol] = quote.price
        return prices
