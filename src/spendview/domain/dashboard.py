"""Dashboard domain service."""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from spendview.domain.aggregation import (
    DEFAULT_PALETTE,
    assign_top_categories,
    compute_category_breakdown,
    compute_direction_totals,
    compute_monthly_buckets,
    compute_summary_metrics,
    compute_weekday_buckets,
    record_date,
)
from spendview.domain.csv_import import CSVRecordSource
from spendview.domain.entities import DashboardReport, TransactionRecord
from spendview.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for building the derived views of one transaction snapshot."""

    def __init__(self, source: Optional[CSVRecordSource] = None):
        """Initialize dashboard service.

        Args:
            source: Record source used by build_report; defaults to a
                CSVRecordSource
        """
        self.source = source or CSVRecordSource()

    def build_report(
        self,
        csv_file_path: str | Path,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        top_n: int = 10,
        summary_top_n: int = 3,
        palette: Sequence[str] = DEFAULT_PALETTE,
    ) -> DashboardReport:
        """Load a CSV snapshot and build every dashboard view from it.

        Raises:
            SourceUnavailableError: If the CSV file cannot be loaded
            ValidationError: If the date range is inverted or the palette
                is empty
        """
        result = self.source.load(csv_file_path)
        return self.build_report_from_records(
            result.records,
            start_date=start_date,
            end_date=end_date,
            top_n=top_n,
            summary_top_n=summary_top_n,
            palette=palette,
            skipped_rows=result.errors,
        )

    def build_report_from_records(
        self,
        records: Sequence[TransactionRecord],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        top_n: int = 10,
        summary_top_n: int = 3,
        palette: Sequence[str] = DEFAULT_PALETTE,
        skipped_rows: Sequence[str] = (),
    ) -> DashboardReport:
        """Build every dashboard view from an in-memory snapshot.

        The category breakdown is computed once and sliced for both the
        full and the summary top-N views, so the two always agree on order.

        Args:
            records: Transaction snapshot
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            top_n: Number of categories in the full breakdown
            summary_top_n: Number of categories in the summary view
            palette: Colors assigned to ranked categories
            skipped_rows: Messages for rows the source rejected

        Returns:
            DashboardReport for the filtered snapshot
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError(
                f"Start date {start_date} is after end date {end_date}"
            )

        snapshot = self.filter_by_date(records, start_date, end_date)
        logger.debug(
            "Aggregating %d of %d records (start=%s, end=%s)",
            len(snapshot),
            len(records),
            start_date,
            end_date,
        )

        breakdown = compute_category_breakdown(
            snapshot, top_n=max(top_n, summary_top_n)
        )

        return DashboardReport(
            start_date=start_date,
            end_date=end_date,
            record_count=len(snapshot),
            direction_totals=tuple(compute_direction_totals(snapshot)),
            category_breakdown=tuple(breakdown[: max(top_n, 0)]),
            top_categories=tuple(assign_top_categories(breakdown, top_n, palette)),
            summary_top_categories=tuple(
                assign_top_categories(breakdown, summary_top_n, palette)
            ),
            monthly_buckets=tuple(compute_monthly_buckets(snapshot)),
            weekday_buckets=tuple(compute_weekday_buckets(snapshot)),
            summary=compute_summary_metrics(snapshot),
            skipped_rows=tuple(skipped_rows),
        )

    def filter_by_date(
        self,
        records: Sequence[TransactionRecord],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionRecord]:
        """Keep records dated within the inclusive range."""
        if start_date is None and end_date is None:
            return list(records)

        filtered = []
        for record in records:
            txn_date = record_date(record)
            if txn_date is None:
                continue
            if start_date is not None and txn_date < start_date:
                continue
            if end_date is not None and txn_date > end_date:
                continue
            filtered.append(record)
        return filtered
