"""Interactive menu loop for a fleet session."""

from dataclasses import dataclass
from typing import Callable

import click

from fleetledger.domain.errors import PersistenceError
from fleetledger.domain.fleet import Fleet
from fleetledger.domain.gateway import PersistenceGateway
from fleetledger.logging_utils import get_logger

logger = get_logger(__name__)

MENU_PROMPT = "(P)rint, (A)dd, (R)emove, (E)xpense, e(X)it "
PROMPT_WIDTH = 44


@dataclass
class MenuSession:
    """State owned by one interactive session."""

    fleet: Fleet
    gateway: PersistenceGateway


# A handler returns False to end the session
Handler = Callable[[MenuSession], bool]


class Menu:
    """Maps single-letter choices to command handlers."""

    def __init__(self):
        self._handlers: dict[str, Handler] = {}

    def add_command(self, key: str, handler: Handler) -> None:
        """Register ``handler`` for the menu letter ``key``."""
        self._handlers[key.upper()] = handler

    def dispatch(self, session: MenuSession, choice: str) -> bool:
        """Run the handler selected by ``choice``.

        Returns:
            False once the session should end
        """
        choice = choice.strip().upper()
        handler = self._handlers.get(choice[:1]) if choice else None
        if handler is None:
            click.echo("Invalid menu option, try again")
            return True
        return handler(session)

    def run(self, session: MenuSession) -> None:
        """Read and run commands until a handler ends the session.

        End of input ends the session like the exit command.
        """
        click.echo("Welcome to the Fleet Management System")
        click.echo("--------------------------------------")
        click.echo()

        running = True
        while running:
            try:
                choice = click.prompt(MENU_PROMPT, default="", show_default=False, prompt_suffix=": ")
            except click.Abort:
                logger.debug("Input closed, ending session")
                click.echo()
                save_snapshot(session)
                click.echo("\nExiting the Fleet Management System")
                return
            running = self.dispatch(session, choice)


def ask(text: str) -> str:
    """Prompt for one line of input, an empty reply is allowed."""
    return click.prompt(f"{text:<{PROMPT_WIDTH}}", default="", show_default=False, prompt_suffix=": ")


def save_snapshot(session: MenuSession) -> bool:
    """Save the fleet, reporting a failure without ending the session.

    Returns:
        True if the snapshot was written
    """
    try:
        session.gateway.save_snapshot(session.fleet)
    except PersistenceError as e:
        click.echo(f"Error saving fleet data: {e}", err=True)
        return False
    return True
