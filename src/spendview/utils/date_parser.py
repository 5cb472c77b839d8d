"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# Reduced, basic and week-date ISO forms are rejected
RECORD_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


def parse_record_date(date_str: str) -> date:
    """Parse a statement date in ISO-8601 form.

    Only the unambiguous "YYYY-MM-DD" layout is accepted, optionally followed
    by a time part ("2024-06-01 14:05:00", "2024-06-01T14:05"), which is
    dropped.

    Args:
        date_str: Date string from a CSV row

    Returns:
        Date object

    Raises:
        ValueError: If date string is not a valid ISO date
    """
    date_str = date_str.strip()
    if not RECORD_DATE_PATTERN.match(date_str):
        raise ValueError(f"Could not parse date '{date_str}': expected YYYY-MM-DD")
    try:
        return date_parser.isoparse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    # Handle relative dates
    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this" + time period
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)
        elif period in WEEKDAYS:
            # Last Monday, etc.
            days_ago = (today.weekday() - WEEKDAYS.index(period)) % 7
            if days_ago == 0:
                days_ago = 7
            return today - timedelta(days=days_ago)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    # Try parsing as absolute date
    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Args:
        period: Period string (this-month, this-year, this-week, last-month, last-year, last-week)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    elif period == "this-year":
        return (today.replace(month=1, day=1), today)

    elif period == "this-week":
        return (today - timedelta(days=today.weekday()), today)

    elif period == "last-month":
        # First day of last month
        start_date = (today - relativedelta(months=1)).replace(day=1)
        # Last day of last month (day before first day of current month)
        end_date = today.replace(day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-year":
        # January 1 of last year
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        # December 31 of last year
        end_date = today.replace(month=1, day=1) - timedelta(days=1)
        return (start_date, end_date)

    elif period == "last-week":
        # Monday of last week
        start_date = today - timedelta(days=today.weekday() + 7)
        # Sunday of last week (Monday + 6 days)
        end_date = start_date + timedelta(days=6)
        return (start_date, end_date)

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: this-month, this-year, this-week, last-month, last-year, last-week")
