"""Monthly trend command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import render_monthly
from spendview.cli.report_loader import load_report_or_exit


@click.command("monthly")
@date_filter_options
@click.pass_context
def monthly(ctx, date_filters: dict):
    """Show inflow, outflow and transaction count per month."""
    report = load_report_or_exit(ctx, date_filters)
    render_monthly(report.monthly_buckets, ctx.obj["currency"])


def register_commands(cli):
    """Register monthly command with main CLI."""
    cli.add_command(monthly)
