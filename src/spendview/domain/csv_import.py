"""CSV record source for mobile-money statement exports."""

import csv
import logging
from pathlib import Path
from typing import Optional, TextIO

from spendview.domain.entities import Direction, RecordLoadResult, TransactionRecord
from spendview.domain.errors import (
    MalformedRecordError,
    SourceUnavailableError,
    csv_not_found,
    malformed_row,
    missing_columns,
)
from spendview.utils.amount_parser import parse_amount
from spendview.utils.date_parser import parse_record_date

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"date", "direction", "clean_amount", "category"}


class CSVRecordSource:
    """Reads statement CSV exports into validated transaction records.

    Rows that fail validation are skipped and reported as messages in the
    load result; they never reach the aggregation engine.
    """

    def load(self, csv_file_path: str | Path) -> RecordLoadResult:
        """Load transaction records from a CSV file.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            RecordLoadResult with the valid records and one message per
            skipped row

        Raises:
            SourceUnavailableError: If the file doesn't exist, can't be read,
                or lacks required columns
        """
        csv_path = Path(csv_file_path)
        if not csv_path.is_file():
            raise SourceUnavailableError(csv_not_found(str(csv_file_path)))

        logger.info("Loading transactions from %s", csv_path)
        try:
            with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
                return self.read(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Could not read CSV file {csv_path}: {e}") from e

    def read(self, stream: TextIO) -> RecordLoadResult:
        """Read transaction records from an open text stream.

        Raises:
            SourceUnavailableError: If the header lacks required columns
        """
        sample = stream.read(1024)
        stream.seek(0)
        delimiter = self._detect_delimiter(sample)

        reader = csv.DictReader(stream, delimiter=delimiter)
        try:
            csv_columns = reader.fieldnames
        except csv.Error as e:
            raise SourceUnavailableError(f"Malformed CSV header: {e}") from e
        if csv_columns is None:
            raise SourceUnavailableError("CSV file has no columns")

        header = {column.strip() for column in csv_columns if column}
        missing = REQUIRED_COLUMNS - header
        if missing:
            raise SourceUnavailableError(missing_columns(missing))

        records: list[TransactionRecord] = []
        errors: list[str] = []

        try:
            for row_num, row in enumerate(reader, start=2):  # header is row 1
                values = {
                    (key or "").strip(): (value or "").strip()
                    for key, value in row.items()
                    if isinstance(value, str) or value is None
                }
                if not any(values.values()):
                    continue

                try:
                    records.append(self.parse_row(values))
                except MalformedRecordError as e:
                    message = malformed_row(row_num, str(e))
                    logger.debug("Skipping %s", message)
                    errors.append(message)
        except csv.Error as e:
            # Structural CSV errors (e.g. oversized fields) abort the whole load
            raise SourceUnavailableError(
                f"Malformed CSV near row {reader.line_num}: {e}"
            ) from e

        logger.info(
            "Loaded %d transactions, skipped %d malformed rows",
            len(records),
            len(errors),
        )
        return RecordLoadResult(records=tuple(records), errors=tuple(errors))

    def parse_row(self, values: dict[str, str]) -> TransactionRecord:
        """Validate one CSV row and build a transaction record.

        Raises:
            MalformedRecordError: If any required field is missing or invalid
        """
        date_str = values.get("date")
        if not date_str:
            raise MalformedRecordError("Missing date")
        try:
            txn_date = parse_record_date(date_str)
        except ValueError as e:
            raise MalformedRecordError(str(e)) from e

        direction = self._parse_direction(values.get("direction"))

        amount_str = values.get("clean_amount")
        if not amount_str:
            raise MalformedRecordError("Missing amount")
        try:
            amount = parse_amount(amount_str)
        except ValueError as e:
            raise MalformedRecordError(str(e)) from e
        if amount < 0:
            raise MalformedRecordError(f"Negative amount '{amount_str}'")

        category = values.get("category")
        if not category:
            raise MalformedRecordError("Missing category")

        return TransactionRecord(
            date=txn_date,
            direction=direction,
            amount=amount,
            description=values.get("description", ""),
            raw_line=values.get("raw", ""),
            category=category,
        )

    def _parse_direction(self, value: Optional[str]) -> Direction:
        if not value:
            raise MalformedRecordError("Missing direction")
        try:
            return Direction(value.strip().upper())
        except ValueError as e:
            raise MalformedRecordError(
                f"Invalid direction '{value}' (expected IN or OUT)"
            ) from e

    def _detect_delimiter(self, sample: str) -> str:
        header_line = sample.splitlines()[0] if sample else ""
        try:
            delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
        except csv.Error:
            return ","
        # The header has no quoted fields, so the real delimiter must occur in it
        return delimiter if delimiter in header_line else ","
