# hodl_engine/core/models/response.py

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from hodl_engine.core.models.report import ReportRow, PortfolioTotals

class ErroredTransaction(BaseModel):
    """
    A ledger record that was skipped, along with the reason for failure.
    """
    record_index: int = Field(..., description="Zero-based position of the record in the submitted ledger.")
    asset: Optional[str] = Field(None, description="Asset symbol of the record, if it could be read.")
    error_reason: str = Field(..., description="Why the record could not be used.")

class PortfolioReportResponse(BaseModel):
    """
    Represents the output response of the portfolio report API.
    """
    rows: List[ReportRow] = Field(
        default_factory=list,
        description="One valuation row per asset held, in first-purchase order."
    )
    totals: PortfolioTotals = Field(default_factory=PortfolioTotals)
    errored_transactions: List[ErroredTransaction] = Field(
        default_factory=list,
        description="Ledger records that were skipped, with error reasons."
    )
    price_source_error: Optional[str] = Field(
        None,
        description="Set when the price source failed as a whole rather than per asset."
    )

    model_config = ConfigDict(
        allow_inf_nan=True,
        json_schema_extra={
            "example": {
                "rows": [
                    {
                        "symbol": "BTC",
                        "price": "400",
                        "amount": "2",
                        "cost_basis": "200",
                        "cost": "400",
                        "value": "800",
                        "percent_change": "100",
                        "gain_or_loss": "gain",
                        "status": "PRICED",
                        "unavailable_reason": None
                    },
                    {
                        "symbol": "SOL",
                        "price": None,
                        "amount": "5",
                        "cost_basis": "20",
                        "cost": "100",
                        "value": None,
                        "percent_change": None,
                        "gain_or_loss": None,
                        "status": "UNPRICED",
                        "unavailable_reason": "No price available for SOL: no quote returned for this asset"
                    }
                ],
                "totals": {"total_cost": "500", "total_value": "800", "priced_assets": 1, "unpriced_assets": 1},
                "errored_transactions": [
                    {"record_index": 3, "asset": "ETH", "error_reason": "price: Input should be a valid decimal"}
                ],
                "price_source_error": None
            }
        }
    )
