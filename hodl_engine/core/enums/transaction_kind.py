# hodl_engine/core/enums/transaction_kind.py

from enum import Enum

class TransactionKind(str, Enum):
    """
    Transaction kinds found in a Coinbase ledger export.
    Only BUY takes part in wallet aggregation; every other kind is dropped.
    Values match the export verbatim, including case.
    """
    BUY = "Buy"
    SELL = "Sell"
    SEND = "Send"
    RECEIVE = "Receive"
    CONVERT = "Convert"
    REWARDS_INCOME = "Rewards Income"
    COINBASE_EARN = "Coinbase Earn"
    ADVANCED_TRADE_BUY = "Advanced Trade Buy"
    ADVANCED_TRADE_SELL = "Advanced Trade Sell"

    @classmethod
    def list(cls):
        """Returns a list of all transaction kind values."""
        return list(map(lambda c: c.value, cls))

    @classmethod
    def is_valid(cls, kind_str: str) -> bool:
        """Checks if a given string is a known transaction kind."""
        return kind_str in cls.list()
