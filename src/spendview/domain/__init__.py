"""Domain layer for spendview application."""

from spendview.domain.csv_import import CSVRecordSource
from spendview.domain.dashboard import DashboardService

__all__ = [
    "CSVRecordSource",
    "DashboardService",
]
