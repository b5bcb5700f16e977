# hodl_engine/logic/parser.py

import csv
import io
import logging
from typing import Any, Optional
from pydantic import ValidationError, TypeAdapter

from hodl_engine.core.enums.transaction_kind import TransactionKind
from hodl_engine.core.exceptions import MalformedTransactionError
from hodl_engine.core.models.transaction import Transaction
from hodl_engine.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

# Positional columns of a Coinbase transaction report; anything past price is ignored.
CSV_COLUMNS = ["timestamp", "kind", "asset", "quantity", "spot_currency", "price"]


def _describe(error: ValidationError) -> str:
    messages = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        messages.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(messages)


class LedgerParser:
    """
    Validates raw ledger records into Transaction objects.

    A Buy record that fails validation becomes a MalformedTransactionError. In
    strict mode it is raised and the run stops; otherwise it goes to the shared
    ErrorReporter and the record is left out of the result. Unreadable records of
    any other kind are dropped without an error.
    """
    def __init__(self, error_reporter: ErrorReporter, strict: bool = False):
        self._single_transaction_adapter = TypeAdapter(Transaction)
        self._error_reporter = error_reporter
        self._strict = strict

    def parse_records(self, raw_records: list[dict[str, Any]]) -> list[Transaction]:
        """
        Parses raw record dictionaries, preserving their order.
        """
        logger.info(f"LedgerParser: Parsing {len(raw_records)} ledger records.")
        parsed: list[Transaction] = []

        for index, raw_record in enumerate(raw_records):
            try:
                parsed.append(self._single_transaction_adapter.validate_python(raw_record))
            except ValidationError as e:
                kind = raw_record.get("kind") if isinstance(raw_record, dict) else None
                if kind != TransactionKind.BUY.value:
                    # Only Buy records reach the wallet
                    logger.debug(f"LedgerParser: Dropping unreadable non-Buy record {index} (kind={kind!r}).")
                    continue
                asset: Optional[str] = None
                if isinstance(raw_record, dict) and isinstance(raw_record.get("asset"), str):
                    asset = raw_record["asset"]
                error = MalformedTransactionError(record_index=index, asset=asset, reason=_describe(e))
                if self._strict:
                    raise error from e
                logger.warning(f"LedgerParser: Skipping malformed record {index}: {error.reason}")
                self._error_reporter.add_malformed(error)

        logger.debug(f"LedgerParser: {len(parsed)} of {len(raw_records)} records parsed successfully.")
        return parsed

    def parse_csv(self, content: str) -> list[Transaction]:
        """
        Parses a CSV ledger export. The first row is a header and is dropped;
        blank lines are skipped. Record indices count data rows from zero.
        """
        rows = [row for row in csv.reader(io.StringIO(content)) if any(cell.strip() for cell in row)]
        records = [dict(zip(CSV_COLUMNS, row)) for row in rows[1:]]
        return self.parse_records(records)
