"""Text rendering of dashboard views."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

import click

from spendview.domain.entities import (
    DirectionTotal,
    MonthlyBucket,
    SummaryMetrics,
    TopCategory,
    WeekdayBucket,
)

BAR_WIDTH = 30
LINE_WIDTH = 80


def format_amount(amount: Decimal, currency: str) -> str:
    """Format an amount rounded to whole units, e.g. 'KES 1,235'."""
    # to_integral_value is not bounded by the context precision, unlike quantize
    whole = amount.to_integral_value(rounding=ROUND_HALF_UP)
    return f"{currency} {whole:,.0f}"


def format_bar(amount: Decimal, largest: Decimal, width: int = BAR_WIDTH) -> str:
    """Return a bar of '#' proportional to amount / largest."""
    if largest <= 0 or amount <= 0:
        return ""
    length = int((amount / largest * width).to_integral_value(rounding=ROUND_HALF_UP))
    return "#" * max(length, 1)


def render_summary(
    summary: SummaryMetrics, top_categories: Sequence[TopCategory], currency: str
) -> None:
    click.echo("\nKey Metrics:")
    click.echo("-" * LINE_WIDTH)
    rows = [
        ("Total Inflow", format_amount(summary.total_in, currency)),
        ("Total Outflow", format_amount(summary.total_out, currency)),
        ("Net Flow", format_amount(summary.net_flow, currency)),
        ("Total Transactions", str(summary.transaction_count)),
        ("Average Transaction", format_amount(summary.average_amount, currency)),
    ]
    if summary.top_category is None:
        rows.append(("Top Spending Category", "N/A"))
    else:
        top = summary.top_category
        rows.append(
            (
                "Top Spending Category",
                f"{top.category} ({format_amount(top.total_amount, currency)})",
            )
        )
    for label, value in rows:
        click.echo(f"{label:<30} {value:>40}")

    if top_categories:
        click.echo("\nTop Categories:")
        for top in top_categories:
            click.echo(
                f"  {top.rank + 1}. {top.category:<30} "
                f"{format_amount(top.total_amount, currency):>18} "
                f"{top.percent_of_total:>6}%  {top.color}"
            )


def render_direction_totals(totals: Sequence[DirectionTotal], currency: str) -> None:
    click.echo("\nIncome vs Expenses:")
    click.echo("-" * LINE_WIDTH)
    if not totals:
        click.echo("No transactions found.")
        return

    largest = max(total.total_amount for total in totals)
    for total in totals:
        amount_str = format_amount(total.total_amount, currency)
        bar = format_bar(total.total_amount, largest)
        click.echo(f"{total.direction.value:<6} {amount_str:>20}  {bar}")


def render_categories(top_categories: Sequence[TopCategory], currency: str) -> None:
    click.echo("\nSpending by Category:")
    click.echo("-" * LINE_WIDTH)
    if not top_categories:
        click.echo("No spending found.")
        return

    click.echo(
        f"{'#':<4} {'Category':<24} {'Total':>16} {'Share':>7} {'Count':>6} {'Average':>14}  Color"
    )
    click.echo("-" * LINE_WIDTH)
    for top in top_categories:
        row = top.breakdown
        click.echo(
            f"{top.rank + 1:<4} {row.category[:24]:<24} "
            f"{format_amount(row.total_amount, currency):>16} "
            f"{str(row.percent_of_total) + '%':>7} "
            f"{row.transaction_count:>6} "
            f"{format_amount(row.average_amount, currency):>14}  {top.color}"
        )


def render_monthly(buckets: Sequence[MonthlyBucket], currency: str) -> None:
    click.echo("\nMonthly Trend:")
    click.echo("-" * LINE_WIDTH)
    if not buckets:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Month':<10} {'In':>16} {'Out':>16} {'Net':>16} {'Count':>8}")
    click.echo("-" * LINE_WIDTH)
    for bucket in buckets:
        click.echo(
            f"{bucket.month_start.strftime('%Y-%m'):<10} "
            f"{format_amount(bucket.total_in, currency):>16} "
            f"{format_amount(bucket.total_out, currency):>16} "
            f"{format_amount(bucket.net_flow, currency):>16} "
            f"{bucket.transaction_count:>8}"
        )


def render_weekdays(buckets: Sequence[WeekdayBucket], currency: str) -> None:
    click.echo("\nSpending by Weekday:")
    click.echo("-" * LINE_WIDTH)
    largest = max((bucket.total_out_amount for bucket in buckets), default=Decimal("0"))
    for bucket in buckets:
        amount_str = format_amount(bucket.total_out_amount, currency)
        bar = format_bar(bucket.total_out_amount, largest)
        click.echo(f"{bucket.weekday:<10} {amount_str:>16}  {bar}")
