# hodl_engine/core/models/request.py

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

class PortfolioReportRequest(BaseModel):
    """
    Represents the input payload for the portfolio report API.
    The ledger is given either as raw records or as a CSV export, not both.
    """
    transactions: list[dict] = Field(
        default_factory=list,
        description="Ledger records (raw dictionaries with kind, asset, quantity, price) in processing order."
    )
    ledger_csv: Optional[str] = Field(
        None,
        description="Coinbase-style CSV export: header row, then timestamp, kind, asset, quantity, spot currency, price."
    )
    prices: Optional[dict[str, Decimal]] = Field(
        None,
        description="USD quotes by symbol. When omitted, quotes are fetched from the configured price source."
    )

    @model_validator(mode="after")
    def check_single_ledger_source(self) -> "PortfolioReportRequest":
        if self.transactions and self.ledger_csv:
            raise ValueError("Provide either 'transactions' or 'ledger_csv', not both")
        return self

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {
                "transactions": [
                    {"kind": "Buy", "asset": "BTC", "quantity": 1, "price": 100},
                    {"kind": "Buy", "asset": "BTC", "quantity": 1, "price": 300},
                    {"kind": "Sell", "asset": "BTC", "quantity": 0.5, "price": 350}
                ],
                "prices": {"BTC": 400}
            }
        },
        extra='ignore'
    )
