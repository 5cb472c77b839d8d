"""Utility functions for spendview."""

from spendview.utils.date_parser import parse_date, parse_record_date, get_date_range
from spendview.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_record_date", "get_date_range", "parse_amount"]
