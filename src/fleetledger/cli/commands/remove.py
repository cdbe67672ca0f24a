"""Remove boat command."""

import click

from fleetledger.cli.error_handling import report_domain_error
from fleetledger.cli.menu import MenuSession, ask
from fleetledger.domain.errors import NotFoundError


def remove_boat(session: MenuSession) -> bool:
    """Remove the first boat with the given name (case-insensitive)."""
    name = ask("Which boat do you want to remove?")
    try:
        session.fleet.remove_boat(name)
        click.echo()
    except NotFoundError as e:
        report_domain_error(e)
    return True


def register_commands(menu):
    """Register remove command with the menu."""
    menu.add_command("R", remove_boat)
