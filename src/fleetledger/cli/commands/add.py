"""Add boat command."""

import click

from fleetledger.cli.menu import MenuSession, ask
from fleetledger.domain.errors import InvalidInputError, wrong_field_count
from fleetledger.domain.fleet import FIELD_COUNT
from fleetledger.logging_utils import get_logger

logger = get_logger(__name__)


def add_boat(session: MenuSession) -> bool:
    """Add a boat from one line of ``category,name,year,make,feet,price``.

    Examples:
        POWER,Marlin,2015,Boston Whaler,22,35000.00
        sailing,Osprey,1998,Hunter,27.5,18500
    """
    data = ask("Please enter the new boat CSV data").split(",")
    click.echo()
    try:
        if len(data) != FIELD_COUNT:
            raise InvalidInputError(wrong_field_count(len(data)))
        session.fleet.add_boat(*data)
    except InvalidInputError as e:
        logger.debug("Rejected boat data: %s", e)
        click.echo("Invalid data format.")
    return True


def register_commands(menu):
    """Register add command with the menu."""
    menu.add_command("A", add_boat)
