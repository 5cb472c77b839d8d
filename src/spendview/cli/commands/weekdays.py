"""Weekday spending command."""

import click

from spendview.cli.date_filters import date_filter_options
from spendview.cli.formatting import render_weekdays
from spendview.cli.report_loader import load_report_or_exit


@click.command("weekdays")
@date_filter_options
@click.pass_context
def weekdays(ctx, date_filters: dict):
    """Show spending per weekday, Monday through Sunday."""
    report = load_report_or_exit(ctx, date_filters)
    render_weekdays(report.weekday_buckets, ctx.obj["currency"])


def register_commands(cli):
    """Register weekdays command with main CLI."""
    cli.add_command(weekdays)
