"""Category breakdown command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import render_categories
from spendview.cli.report_loader import load_report_or_exit


@click.command("categories")
@click.option("--top", "top_n", type=click.IntRange(min=1), default=10, show_default=True, help="Number of categories to show")
@date_filter_options
@click.pass_context
def categories(ctx, top_n: int, date_filters: dict):
    """Show spending per category, largest first."""
    report = load_report_or_exit(ctx, date_filters, top_n=top_n)
    render_categories(report.top_categories, ctx.obj["currency"])


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(categories)
