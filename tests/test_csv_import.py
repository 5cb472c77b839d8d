"""Domain tests for the CSV record source."""

import io
from datetime import date
from decimal import Decimal

import pytest

from spendview.domain.entities import Direction, TransactionRecord
from spendview.domain.errors import MalformedRecordError, SourceUnavailableError


def test_load_result_contract(record_source, fixtures_dir):
    """Load returns typed records and an empty error list for clean data."""
    result = record_source.load(fixtures_dir / "sample_transactions.csv")

    assert len(result.records) == 5
    assert result.errors == ()
    assert all(isinstance(record, TransactionRecord) for record in result.records)


def test_load_parses_fields(record_source, fixtures_dir):
    result = record_source.load(str(fixtures_dir / "sample_transactions.csv"))

    first = result.records[0]
    assert first.date == date(2024, 6, 1)
    assert first.direction is Direction.IN
    assert first.amount == Decimal("1000")
    assert first.description == "Salary June"
    assert first.raw_line == "Confirmed. You have received Ksh1,000.00 from ACME LTD"
    assert first.category == "Salary"


def test_load_keeps_file_order(record_source, fixtures_dir):
    result = record_source.load(fixtures_dir / "sample_transactions.csv")

    assert [record.category for record in result.records] == [
        "Salary",
        "Groceries",
        "Transport",
        "Groceries",
        "Transfers",
    ]


def test_load_missing_file_raises(record_source, tmp_path):
    with pytest.raises(SourceUnavailableError) as excinfo:
        record_source.load(tmp_path / "missing.csv")

    assert "not found" in str(excinfo.value)


def test_load_missing_columns_raises(record_source, fixtures_dir):
    with pytest.raises(SourceUnavailableError) as excinfo:
        record_source.load(fixtures_dir / "sample_transactions_missing_cols.csv")

    message = str(excinfo.value).lower()
    assert "missing required columns" in message
    assert "clean_amount" in message
    assert "direction" in message


def test_load_empty_file_raises(record_source, tmp_path):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("", encoding="utf-8")

    with pytest.raises(SourceUnavailableError):
        record_source.load(csv_path)


def test_load_header_only_gives_no_records(record_source, tmp_path):
    csv_path = tmp_path / "header_only.csv"
    csv_path.write_text(
        "date,direction,clean_amount,description,raw,category\n", encoding="utf-8"
    )

    result = record_source.load(csv_path)

    assert result.records == ()
    assert result.errors == ()


def test_malformed_rows_are_skipped(record_source, fixtures_dir):
    result = record_source.load(fixtures_dir / "sample_transactions_malformed.csv")

    assert len(result.records) == 2
    assert len(result.errors) == 7
    assert result.records[1].direction is Direction.OUT
    assert result.records[1].amount == Decimal("75")


def test_malformed_row_messages(record_source, fixtures_dir):
    result = record_source.load(fixtures_dir / "sample_transactions_malformed.csv")
    errors = result.errors

    assert errors[0] == "Row 3: Missing date"
    assert errors[1].startswith("Row 4: Could not parse date")
    assert errors[2].startswith("Row 5: Invalid direction 'SIDEWAYS'")
    assert errors[3].startswith("Row 6: Could not parse amount")
    assert errors[4].startswith("Row 7:") and "not a finite number" in errors[4]
    assert errors[5] == "Row 8: Negative amount '-20'"
    assert errors[6] == "Row 9: Missing category"


def test_semicolon_delimiter_and_formatted_amounts(record_source, fixtures_dir):
    result = record_source.load(fixtures_dir / "sample_transactions_semicolon.csv")

    assert result.errors == ()
    assert [record.amount for record in result.records] == [
        Decimal("1000.00"),
        Decimal("300"),
    ]
    assert result.records[0].date == date(2024, 6, 1)


def test_read_from_stream(record_source):
    stream = io.StringIO(
        "date,direction,clean_amount,description,raw,category\n"
        "2024-06-02,OUT,300,Naivas,raw,Groceries\n"
        "\n"
        "2024-06-03,OUT,200,Matatu,raw,Transport\n"
    )

    result = record_source.read(stream)

    assert [record.category for record in result.records] == ["Groceries", "Transport"]
    assert result.errors == ()


def test_optional_columns_may_be_absent(record_source):
    stream = io.StringIO(
        "date,direction,clean_amount,category\n"
        "2024-06-02,OUT,300,Groceries\n"
    )

    result = record_source.read(stream)

    assert result.records[0].description == ""
    assert result.records[0].raw_line == ""


def test_parse_row_rejects_missing_amount(record_source):
    with pytest.raises(MalformedRecordError, match="Missing amount"):
        record_source.parse_row(
            {"date": "2024-06-02", "direction": "OUT", "clean_amount": "", "category": "Food"}
        )


def test_parse_row_rejects_missing_direction(record_source):
    with pytest.raises(MalformedRecordError, match="Missing direction"):
        record_source.parse_row(
            {"date": "2024-06-02", "direction": "", "clean_amount": "5", "category": "Food"}
        )


def test_parse_row_drops_time_of_day(record_source):
    record = record_source.parse_row(
        {
            "date": "2024-06-02T23:59:59",
            "direction": " in ",
            "clean_amount": "5",
            "category": "Gift",
        }
    )

    assert record.date == date(2024, 6, 2)
    assert record.direction is Direction.IN


def test_partial_iso_dates_are_malformed(record_source):
    stream = io.StringIO(
        "date,direction,clean_amount,description,raw,category\n"
        "2024-06,OUT,100,Naivas,raw,Groceries\n"
        "20240601,OUT,100,Naivas,raw,Groceries\n"
    )

    result = record_source.read(stream)

    assert result.records == ()
    assert len(result.errors) == 2
    assert all("Could not parse date" in error for error in result.errors)


def test_oversized_field_raises_source_unavailable(record_source, tmp_path):
    csv_path = tmp_path / "oversized.csv"
    csv_path.write_text(
        "date,direction,clean_amount,description,raw,category\n"
        f"2024-06-01,OUT,100,{'x' * 200_000},raw,Groceries\n",
        encoding="utf-8",
    )

    with pytest.raises(SourceUnavailableError, match="Malformed CSV"):
        record_source.load(csv_path)
