"""Income vs expense totals command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import render_direction_totals
from spendview.cli.report_loader import load_report_or_exit


@click.command("totals")
@date_filter_options
@click.pass_context
def totals(ctx, date_filters: dict):
    """Show total money received (IN) and spent (OUT)."""
    report = load_report_or_exit(ctx, date_filters)
    render_direction_totals(report.direction_totals, ctx.obj["currency"])


def register_commands(cli):
    """Register totals command with main CLI."""
    cli.add_command(totals)
