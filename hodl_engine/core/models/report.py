# hodl_engine/core/models/report.py

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from hodl_engine.core.enums.valuation_status import ValuationStatus, GainOrLoss

class ReportRow(BaseModel):
    """
    Valuation of one wallet asset. Numbers are left unformatted.
    Price-derived fields are None when the asset is unpriced; percent_change
    is NaN when the cost basis is zero.
    """
    symbol: str
    price: Optional[Decimal] = Field(None, description="Current unit price, None if unpriced")
    amount: Decimal = Field(..., description="Units held")
    cost_basis: Decimal = Field(..., description="Mean purchase price")
    cost: Decimal = Field(..., description="amount * cost_basis")
    value: Optional[Decimal] = Field(None, description="amount * price, None if unpriced")
    percent_change: Optional[Decimal] = Field(None, description="(price - cost_basis) / cost_basis * 100")
    gain_or_loss: Optional[GainOrLoss] = None
    status: ValuationStatus = ValuationStatus.PRICED
    unavailable_reason: Optional[str] = None

    model_config = ConfigDict(frozen=True, allow_inf_nan=True)


class PortfolioTotals(BaseModel):
    """Portfolio-wide sums over the report rows."""
    total_cost: Decimal = Decimal(0)
    total_value: Decimal = Field(default=Decimal(0), description="Sum over priced rows only")
    priced_assets: int = 0
    unpriced_assets: int = 0

    model_config = ConfigDict(allow_inf_nan=True)
