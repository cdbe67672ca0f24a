"""Fleet report command."""

import click

from fleetledger.cli.menu import MenuSession


def print_report(session: MenuSession) -> bool:
    """Print every boat and the fleet totals."""
    click.echo("\nFleet report:")
    for line in session.fleet.report():
        click.echo(f"    {line}")
    click.echo()
    return True


def register_commands(menu):
    """Register report command with the menu."""
    menu.add_command("P", print_report)
