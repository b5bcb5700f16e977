# hodl_engine/core/enums/valuation_status.py

from enum import Enum

class ValuationStatus(str, Enum):
    """
    Outcome of valuing a single wallet entry against a price snapshot.
    """
    PRICED = "PRICED"
    UNPRICED = "UNPRICED" # No quote for the asset; price-derived fields are None
    ZERO_COST_BASIS = "ZERO_COST_BASIS" # percent_change is NaN


class GainOrLoss(str, Enum):
    GAIN = "gain"
    LOSS = "loss"
