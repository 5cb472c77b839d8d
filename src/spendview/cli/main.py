"""Main CLI entry point."""

import logging

import click

# Import and register all commands at module level
from spendview.cli.commands import (
    summary,
    totals,
    categories,
    monthly,
    weekdays,
    dashboard,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--csv-path",
    type=click.Path(dir_okay=False),
    help="Path to transactions CSV file (overrides SPENDVIEW_CSV_PATH environment variable)",
    envvar="SPENDVIEW_CSV_PATH",
)
@click.option(
    "--currency",
    default="KES",
    show_default=True,
    help="Currency label for amounts (overrides SPENDVIEW_CURRENCY environment variable)",
    envvar="SPENDVIEW_CURRENCY",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (overrides SPENDVIEW_LOG_LEVEL environment variable)",
    envvar="SPENDVIEW_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, csv_path: str | None, currency: str, log_level: str):
    """Spendview - Mobile-money spending dashboard.

    Summarize a CSV export of mobile-money transactions: income vs
    expenses, spending per category, monthly trends and weekday patterns.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ctx.obj["csv_path"] = csv_path
    ctx.obj["currency"] = currency


# Register all commands
summary.register_commands(cli)
totals.register_commands(cli)
categories.register_commands(cli)
monthly.register_commands(cli)
weekdays.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
