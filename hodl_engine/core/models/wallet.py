# hodl_engine/core/models/wallet.py

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict

class WalletEntry(BaseModel):
    """
    Running holdings and cost basis for one asset.

    cost_basis is the plain arithmetic mean of the recorded purchase prices,
    NOT a quantity-weighted average: a 1 unit buy at 100 and a 1000 unit buy
    at 200 give a basis of 150.
    """
    total: Decimal = Field(default=Decimal(0), description="Sum of bought quantities")
    purchases: tuple[Decimal, ...] = Field(default=(), description="Unit prices in processing order")
    cost_basis: Decimal = Field(default=Decimal(0), description="Mean of purchases")

    model_config = ConfigDict(frozen=True, allow_inf_nan=True)

    def record(self, quantity: Decimal, price: Decimal) -> "WalletEntry":
        """Returns a new entry with the purchase applied; self is left untouched."""
        purchases = self.purchases + (price,)
        return WalletEntry(
            total=self.total + quantity,
            purchases=purchases,
            cost_basis=sum(purchases, Decimal(0)) / len(purchases)
        )


Wallet = dict[str, WalletEntry]
