# hodl_engine/logic/error_reporter.py

from typing import Optional

from hodl_engine.core.exceptions import MalformedTransactionError
from hodl_engine.core.models.response import ErroredTransaction

class ErrorReporter:
    """
    Collects per-record errors raised while building one portfolio report.
    """
    def __init__(self):
        self._errored_transactions: dict[int, ErroredTransaction] = {}

    def add_error(self, record_index: int, error_reason: str, asset: Optional[str] = None):
        """
        Adds an error for a ledger record. If the record already has an error,
        the new reason is appended unless it is already present.
        """
        if record_index in self._errored_transactions:
            existing = self._errored_transactions[record_index]
            if error_reason not in existing.error_reason:
                existing.error_reason += f"; {error_reason}"
            if existing.asset is None and asset is not None:
                existing.asset = asset
        else:
            self._errored_transactions[record_index] = ErroredTransaction(
                record_index=record_index,
                asset=asset,
                error_reason=error_reason
            )

    def add_malformed(self, error: MalformedTransactionError):
        """
        Records a MalformedTransactionError raised by the parser or aggregator.
        """
        self.add_error(error.record_index, error.reason, asset=error.asset)

    def get_errors(self) -> list[ErroredTransaction]:
        """
        Returns all collected errors ordered by record position.
        """
        return [self._errored_transactions[index] for index in sorted(self._errored_transactions)]

    def has_errors(self) -> bool:
        return bool(self._errored_transactions)

    def has_errors_for(self, record_index: int) -> bool:
        return record_index in self._errored_transactions

    def clear(self):
        """
        Clears all collected errors.
        """
        self._errored_transactions = {}
