"""Summary command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import render_summary
from spendview.cli.report_loader import load_report_or_exit


@click.command("summary")
@click.option("--top", "top_n", type=click.IntRange(min=1), default=3, show_default=True, help="Number of top categories to list")
@date_filter_options
@click.pass_context
def summary(ctx, top_n: int, date_filters: dict):
    """Show key metrics: inflow, outflow, net flow and top categories."""
    report = load_report_or_exit(ctx, date_filters, top_n=top_n)
    render_summary(report.summary, report.top_categories, ctx.obj["currency"])


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
