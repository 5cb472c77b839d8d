"""CLI error handling helpers."""

import logging

import click

from spendview.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Report a failed dashboard load on stderr and exit with status 1.

    The underlying cause, if any, is logged at debug level so that
    ``--log-level DEBUG`` shows where a CSV or filter error came from.
    """
    logger.debug("Command failed: %s", error, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
