# hodl_engine/core/exceptions.py

from typing import Optional


class HodlEngineError(Exception):
    """Base exception for portfolio report errors."""

    def __init__(self, message: str, code: str = "HODL_ENGINE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class MalformedTransactionError(HodlEngineError):
    """
    Raised when a ledger record cannot be turned into a usable transaction,
    e.g. its quantity or price is not a number.
    """

    def __init__(self, record_index: int, reason: str, asset: Optional[str] = None):
        self.record_index = record_index
        self.asset = asset
        self.reason = reason
        label = f"Record {record_index}" + (f" ({asset})" if asset else "")
        super().__init__(f"{label}: {reason}", code="MALFORMED_TRANSACTION")


class MissingPriceError(HodlEngineError):
    """Raised when an asset held in the wallet has no quote in the price snapshot."""

    def __init__(self, asset: str, reason: str):
        self.asset = asset
        self.reason = reason
        super().__init__(f"No price available for {asset}: {reason}", code="MISSING_PRICE")


class PriceSourceError(HodlEngineError):
    """Raised when the market data source cannot produce any quotes at all."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason, code="PRICE_SOURCE_UNAVAILABLE")
