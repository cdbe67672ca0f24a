"""Exit command."""

import click

from fleetledger.cli.menu import MenuSession, save_snapshot


def exit_session(session: MenuSession) -> bool:
    """Save the fleet snapshot and end the session."""
    save_snapshot(session)
    click.echo("\nExiting the Fleet Management System")
    return False


def register_commands(menu):
    """Register exit command with the menu."""
    menu.add_command("X", exit_session)
