"""Expense command."""

import click

from fleetledger.cli.error_handling import report_domain_error
from fleetledger.cli.menu import MenuSession, ask
from fleetledger.domain.errors import (
    BudgetExceededError,
    InvalidInputError,
    NotFoundError,
    boat_not_found,
)
from fleetledger.utils.amount_parser import parse_amount


def record_expense(session: MenuSession) -> bool:
    """Spend money on a boat, up to what is left of its purchase price."""
    name = ask("Which boat do you want to spend on?")
    if session.fleet.find(name) is None:
        report_domain_error(NotFoundError(boat_not_found(name)))
        return True

    amount_str = ask("How much do you want to spend?")
    try:
        amount = parse_amount(amount_str)
    except ValueError as e:
        report_domain_error(InvalidInputError(f"Invalid amount: {e}"))
        return True

    try:
        total = session.fleet.record_expense(name, amount)
    except BudgetExceededError as e:
        report_domain_error(e)
        return True

    click.echo(f"Expense authorized, ${total:.2f} spent.")
    click.echo()
    return True


def register_commands(menu):
    """Register expense command with the menu."""
    menu.add_command("E", record_expense)
