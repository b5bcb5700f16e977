# hodl_engine/core/models/prices.py

from decimal import Decimal
from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field, ConfigDict

from hodl_engine.core.exceptions import MissingPriceError

QUOTE_CURRENCY = "USD"

class PriceSnapshot(BaseModel):
    """
    Point-in-time quotes keyed by asset symbol.

    A snapshot is either a success (prices may still be partial) or a failure
    carrying error_reason. This keeps "the price source is down" apart from
    "this asset has no quote".
    """
    prices: dict[str, Decimal] = Field(default_factory=dict)
    error_reason: Optional[str] = Field(None, description="Why the price source produced no quotes")
    quote_currency: str = QUOTE_CURRENCY

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @classmethod
    def of(cls, prices: Mapping[str, Any]) -> "PriceSnapshot":
        return cls(prices=dict(prices))

    @classmethod
    def failed(cls, reason: str) -> "PriceSnapshot":
        return cls(prices={}, error_reason=reason)

    @property
    def is_available(self) -> bool:
        return self.error_reason is None

    def price_for(self, asset: str) -> Decimal:
        """
        Returns the quote for an asset.
        Raises MissingPriceError if there is none; never substitutes zero.
        """
        if asset in self.prices:
            return self.prices[asset]
        if self.error_reason:
            raise MissingPriceError(asset, f"price source unavailable ({self.error_reason})")
        raise MissingPriceError(asset, "no quote returned for this asset")
