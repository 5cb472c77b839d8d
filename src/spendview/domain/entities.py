"""Domain model entities for spendview.

These are pure data classes for the transaction records read from a statement
export and for every derived view the aggregation engine produces. Derived
entities are created fresh on each call and never mutate the input records.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    """Whether money was received (IN) or spent (OUT)."""

    IN = "IN"
    OUT = "OUT"


@dataclass(frozen=True)
class TransactionRecord:
    """A single validated statement line."""

    date: date
    direction: Direction
    amount: Decimal
    description: str
    raw_line: str
    category: str


@dataclass(frozen=True)
class DirectionTotal:
    """Total amount moved in one direction."""

    direction: Direction
    total_amount: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Spending aggregated for one category of OUT records."""

    category: str
    total_amount: Decimal
    transaction_count: int
    average_amount: Decimal
    percent_of_total: Decimal


@dataclass(frozen=True)
class TopCategory:
    """Breakdown row with its display rank and assigned color."""

    breakdown: CategoryBreakdown
    rank: int
    color: str

    @property
    def category(self) -> str:
        return self.breakdown.category

    @property
    def total_amount(self) -> Decimal:
        return self.breakdown.total_amount

    @property
    def percent_of_total(self) -> Decimal:
        return self.breakdown.percent_of_total


@dataclass(frozen=True)
class MonthlyBucket:
    """Inflow and outflow for one calendar month."""

    month_start: date
    total_in: Decimal
    total_out: Decimal
    transaction_count: int

    @property
    def net_flow(self) -> Decimal:
        return self.total_in - self.total_out

    @property
    def total_amount(self) -> Decimal:
        return self.total_in + self.total_out


@dataclass(frozen=True)
class WeekdayBucket:
    """Spending for one weekday, keyed by its English name."""

    weekday: str
    total_out_amount: Decimal


@dataclass(frozen=True)
class SummaryMetrics:
    """Headline statistics for a snapshot.

    top_category is None when the snapshot has no OUT records.
    """

    total_in: Decimal
    total_out: Decimal
    net_flow: Decimal
    transaction_count: int
    average_amount: Decimal
    top_category: Optional[CategoryBreakdown]


@dataclass(frozen=True)
class RecordLoadResult:
    """Records read from a source plus messages for skipped rows."""

    records: tuple[TransactionRecord, ...]
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class DashboardReport:
    """Every derived view computed from one snapshot."""

    start_date: Optional[date]
    end_date: Optional[date]
    record_count: int
    direction_totals: tuple[DirectionTotal, ...]
    category_breakdown: tuple[CategoryBreakdown, ...]
    top_categories: tuple[TopCategory, ...]
    summary_top_categories: tuple[TopCategory, ...]
    monthly_buckets: tuple[MonthlyBucket, ...]
    weekday_buckets: tuple[WeekdayBucket, ...]
    summary: SummaryMetrics
    skipped_rows: tuple[str, ...] = ()
