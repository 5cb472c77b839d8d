"""Aggregation engine for transaction snapshots.

Every function in this module is pure: it reads a sequence of records and
returns newly built result objects, without touching the input. Records with
an unknown direction or a non-finite amount are skipped by every aggregation.
Records without a real date are additionally skipped by the month and weekday
rollups.
"""

import math
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterator, Optional, Sequence

from spendview.domain.entities import (
    CategoryBreakdown,
    Direction,
    DirectionTotal,
    MonthlyBucket,
    SummaryMetrics,
    TopCategory,
    TransactionRecord,
    WeekdayBucket,
)
from spendview.domain.errors import ValidationError, empty_palette

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

DEFAULT_PALETTE = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#06b6d4",
    "#84cc16",
    "#f97316",
    "#ec4899",
    "#6366f1",
)

ZERO = Decimal("0")
PERCENT_QUANTUM = Decimal("0.1")


def record_direction(record: TransactionRecord) -> Optional[Direction]:
    """Return the record's direction, or None if it is not IN or OUT."""
    try:
        return Direction(record.direction)
    except ValueError:
        return None


def record_amount(record: TransactionRecord) -> Optional[Decimal]:
    """Return the record's amount as a Decimal, or None if it is not finite."""
    value: Any = record.amount
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return Decimal(str(value))


def record_date(record: TransactionRecord) -> Optional[date]:
    """Return the record's calendar date, or None if it has no real date."""
    value: Any = record.date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def iter_valid(
    records: Sequence[TransactionRecord],
) -> Iterator[tuple[TransactionRecord, Direction, Decimal]]:
    """Yield (record, direction, amount) for records that can be aggregated."""
    for record in records:
        direction = record_direction(record)
        if direction is None:
            continue
        amount = record_amount(record)
        if amount is None:
            continue
        yield record, direction, amount


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return part as a percentage of whole, rounded to one decimal place."""
    if whole == 0:
        return ZERO.quantize(PERCENT_QUANTUM)
    return (part / whole * 100).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)


def compute_direction_totals(
    records: Sequence[TransactionRecord],
) -> list[DirectionTotal]:
    """Sum amounts per direction, in order of first appearance."""
    totals: dict[Direction, Decimal] = {}
    for _, direction, amount in iter_valid(records):
        totals[direction] = totals.get(direction, ZERO) + amount

    return [
        DirectionTotal(direction=direction, total_amount=total)
        for direction, total in totals.items()
    ]


def compute_category_breakdown(
    records: Sequence[TransactionRecord], top_n: Optional[int] = 10
) -> list[CategoryBreakdown]:
    """Aggregate OUT records per category, largest total first.

    Args:
        records: Transaction snapshot
        top_n: Maximum number of rows to return, or None for all rows

    Returns:
        Breakdown rows sorted by total descending. Categories with equal
        totals keep the order in which they first appear in the snapshot.
        Percentages are relative to all OUT spending, not just the rows
        returned.
    """
    groups: dict[str, dict[str, Any]] = {}
    for record, direction, amount in iter_valid(records):
        if direction is not Direction.OUT:
            continue
        group = groups.setdefault(record.category, {"total": ZERO, "count": 0})
        group["total"] += amount
        group["count"] += 1

    total_out = sum((group["total"] for group in groups.values()), ZERO)

    rows = [
        CategoryBreakdown(
            category=category,
            total_amount=group["total"],
            transaction_count=group["count"],
            average_amount=group["total"] / group["count"],
            percent_of_total=percent_of(group["total"], total_out),
        )
        for category, group in groups.items()
    ]
    # sorted() is stable, so ties stay in first-appearance order
    rows = sorted(rows, key=lambda row: row.total_amount, reverse=True)

    if top_n is None:
        return rows
    return rows[: max(top_n, 0)]


def assign_top_categories(
    breakdown: Sequence[CategoryBreakdown],
    n: int,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[TopCategory]:
    """Rank the first n rows of a sorted breakdown and give each a color.

    Colors cycle through the palette when n exceeds its length, so the
    result for a smaller n is always a prefix of the result for a larger n.

    Raises:
        ValidationError: If the palette is empty
    """
    if not palette:
        raise ValidationError(empty_palette())

    return [
        TopCategory(breakdown=row, rank=index, color=palette[index % len(palette)])
        for index, row in enumerate(breakdown[: max(n, 0)])
    ]


def compute_monthly_buckets(
    records: Sequence[TransactionRecord],
) -> list[MonthlyBucket]:
    """Roll records up by calendar month, oldest month first."""
    buckets: dict[date, dict[str, Any]] = defaultdict(
        lambda: {"in": ZERO, "out": ZERO, "count": 0}
    )

    for record, direction, amount in iter_valid(records):
        txn_date = record_date(record)
        if txn_date is None:
            continue
        bucket = buckets[txn_date.replace(day=1)]
        if direction is Direction.IN:
            bucket["in"] += amount
        else:
            bucket["out"] += amount
        bucket["count"] += 1

    return [
        MonthlyBucket(
            month_start=month_start,
            total_in=data["in"],
            total_out=data["out"],
            transaction_count=data["count"],
        )
        for month_start, data in sorted(buckets.items())
    ]


def compute_weekday_buckets(
    records: Sequence[TransactionRecord],
) -> list[WeekdayBucket]:
    """Sum OUT amounts per weekday, always returning Monday through Sunday."""
    totals = {name: ZERO for name in WEEKDAY_NAMES}

    for record, direction, amount in iter_valid(records):
        if direction is not Direction.OUT:
            continue
        txn_date = record_date(record)
        if txn_date is None:
            continue
        totals[WEEKDAY_NAMES[txn_date.weekday()]] += amount

    return [
        WeekdayBucket(weekday=name, total_out_amount=totals[name])
        for name in WEEKDAY_NAMES
    ]


def compute_summary_metrics(records: Sequence[TransactionRecord]) -> SummaryMetrics:
    """Compute headline totals, averages and the top spending category."""
    total_in = ZERO
    total_out = ZERO
    count = 0

    for _, direction, amount in iter_valid(records):
        if direction is Direction.IN:
            total_in += amount
        else:
            total_out += amount
        count += 1

    average = (total_in + total_out) / count if count else ZERO
    top = compute_category_breakdown(records, top_n=1)

    return SummaryMetrics(
        total_in=total_in,
        total_out=total_out,
        net_flow=total_in - total_out,
        transaction_count=count,
        average_amount=average,
        top_category=top[0] if top else None,
    )
