"""Shared pytest fixtures for spendview tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from spendview.domain.csv_import import CSVRecordSource
from spendview.domain.dashboard import DashboardService
from spendview.domain.entities import Direction, TransactionRecord


def make_record(
    txn_date=date(2024, 6, 1),
    direction=Direction.OUT,
    amount="0",
    category="Groceries",
    description="",
    raw_line="",
):
    """Build a TransactionRecord with sensible defaults."""
    if isinstance(amount, (str, int)):
        amount = Decimal(str(amount))
    return TransactionRecord(
        date=txn_date,
        direction=direction,
        amount=amount,
        description=description,
        raw_line=raw_line,
        category=category,
    )


@pytest.fixture
def record_factory():
    """Return the record builder helper."""
    return make_record


@pytest.fixture
def sample_records():
    """Salary in, groceries and transport out, over three days of June 2024."""
    return [
        make_record(date(2024, 6, 1), Direction.IN, "1000", "Salary"),
        make_record(date(2024, 6, 2), Direction.OUT, "300", "Groceries"),
        make_record(date(2024, 6, 3), Direction.OUT, "200", "Transport"),
    ]


@pytest.fixture
def record_source():
    """Create a CSVRecordSource."""
    return CSVRecordSource()


@pytest.fixture
def dashboard_service(record_source):
    """Create a DashboardService backed by the CSV record source."""
    return DashboardService(record_source)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
