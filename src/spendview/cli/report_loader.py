"""CLI helpers for loading a dashboard report."""

from __future__ import annotations

import click

from spendview.cli.date_filters import resolve_cli_date_range
from spendview.cli.error_handling import handle_domain_error
from spendview.domain.dashboard import DashboardService
from spendview.domain.entities import DashboardReport
from spendview.domain.errors import DomainError


def load_report_or_exit(
    ctx: click.Context, date_filters: dict, top_n: int = 10
) -> DashboardReport:
    """Build the dashboard report for the configured CSV, or exit with a CLI error.

    Skipped CSV rows are reported on stderr; they do not fail the command.
    """
    start, end = resolve_cli_date_range(ctx, **date_filters)

    csv_path = ctx.obj.get("csv_path")
    if not csv_path:
        click.echo(
            "Error: No CSV file given. Use --csv-path or set SPENDVIEW_CSV_PATH.",
            err=True,
        )
        ctx.exit(1)

    service = DashboardService()
    try:
        report = service.build_report(
            csv_path, start_date=start, end_date=end, top_n=top_n
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if report.skipped_rows:
        click.echo(f"Skipped {len(report.skipped_rows)} malformed row(s):", err=True)
        for error in report.skipped_rows:
            click.echo(f"  {error}", err=True)

    return report
