"""CLI error handling helpers."""

import click

from fleetledger.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_domain_error(error: DomainError | ValueError) -> None:
    """Render a domain error and let the session continue."""
    click.echo(str(error), err=True)
    click.echo()
