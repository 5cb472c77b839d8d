"""CLI helpers for date range resolution."""

from datetime import date
import functools

import click

from spendview.utils.date_parser import get_date_range, parse_date

PERIOD_OPTIONS = (
    "this-month",
    "this-year",
    "this-week",
    "last-month",
    "last-year",
    "last-week",
)


def date_filter_options(func):
    """Add --start-date/--end-date and the period flags to a command.

    The wrapped command receives the raw values as a ``date_filters`` dict.
    """
    @click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
    @click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
    @click.option("--this-month", is_flag=True, help="Filter to current month")
    @click.option("--this-year", is_flag=True, help="Filter to current year")
    @click.option("--this-week", is_flag=True, help="Filter to current week")
    @click.option("--last-month", is_flag=True, help="Filter to previous month")
    @click.option("--last-year", is_flag=True, help="Filter to previous year")
    @click.option("--last-week", is_flag=True, help="Filter to previous week")
    @functools.wraps(func)
    def wrapper(*args, start_date, end_date, **kwargs):
        period_flags = {
            period: kwargs.pop(period.replace("-", "_")) for period in PERIOD_OPTIONS
        }
        kwargs["date_filters"] = {
            "start_date": start_date,
            "end_date": end_date,
            "period_flags": period_flags,
        }
        return func(*args, **kwargs)

    return wrapper


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

    return start, end
