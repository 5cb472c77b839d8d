"""Full dashboard command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import (
    render_categories,
    render_direction_totals,
    render_monthly,
    render_summary,
    render_weekdays,
)
from spendview.cli.report_loader import load_report_or_exit


@click.command("dashboard")
@click.option("--top", "top_n", type=click.IntRange(min=1), default=10, show_default=True, help="Number of categories in the breakdown")
@date_filter_options
@click.pass_context
def dashboard(ctx, top_n: int, date_filters: dict):
    """Show every dashboard view for the same snapshot."""
    report = load_report_or_exit(ctx, date_filters, top_n=top_n)
    currency = ctx.obj["currency"]

    if report.record_count == 0:
        click.echo("No transactions found.")
        return

    render_summary(report.summary, report.summary_top_categories, currency)
    render_direction_totals(report.direction_totals, currency)
    render_categories(report.top_categories, currency)
    render_monthly(report.monthly_buckets, currency)
    render_weekdays(report.weekday_buckets, currency)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
