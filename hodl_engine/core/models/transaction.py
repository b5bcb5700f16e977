# hodl_engine/core/models/transaction.py

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, model_validator

from hodl_engine.core.enums.transaction_kind import TransactionKind

class Transaction(BaseModel):
    """
    A single ledger record as consumed by the wallet aggregator.
    Only kind, asset, quantity and price are kept; any other ledger columns are dropped.
    """
    kind: str = Field(..., description="Ledger classification, e.g. 'Buy' or 'Sell' (case-sensitive)")
    asset: str = Field(..., min_length=1, description="Asset symbol, e.g. 'BTC' (case-sensitive)")
    quantity: Decimal = Field(..., description="Amount of the asset moved by the transaction")
    price: Decimal = Field(..., description="Per-unit price in USD at transaction time")

    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        allow_inf_nan=False # NaN and Infinity are rejected at the ledger boundary
    )

    @model_validator(mode="after")
    def check_buy_quantity(self) -> "Transaction":
        if self.kind == TransactionKind.BUY.value and self.quantity < 0:
            raise ValueError(f"Buy quantity must be non-negative, got {self.quantity}")
        return self
