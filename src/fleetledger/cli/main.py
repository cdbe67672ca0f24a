"""Main CLI entry point."""

import logging

import click

from fleetledger.cli.error_handling import handle_domain_error
from fleetledger.cli.menu import Menu, MenuSession, save_snapshot
from fleetledger.database.factories import DB_PATH_ENV, create_sqlite_database
from fleetledger.domain.errors import FleetImportError
from fleetledger.domain.gateway import PersistenceGateway
from fleetledger.logging_utils import configure_root_logger

# Import and register all commands at module level
from fleetledger.cli.commands import add, exit_cmd, expense, remove, report

menu = Menu()

# Register all commands
report.register_commands(menu)
add.register_commands(menu)
remove.register_commands(menu)
expense.register_commands(menu)
exit_cmd.register_commands(menu)


@click.command()
@click.argument(
    "import_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help=f"Path to snapshot file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx, import_file: str | None, db_path: str | None, verbose: bool):
    """Fleet Management System - track what a fleet of boats costs.

    Starts an interactive session on the saved fleet snapshot. When IMPORT_FILE
    is given, the fleet is built from that CSV file instead and saved at once.
    Each CSV line reads: category,name,year,make,feet,purchasePrice
    """
    if verbose:
        configure_root_logger(logging.DEBUG)

    db = create_sqlite_database(database_path=db_path)
    gateway = PersistenceGateway(db)

    if import_file is not None:
        try:
            fleet = gateway.import_fleet(import_file)
        except FleetImportError as e:
            handle_domain_error(ctx, e)
            return
        session = MenuSession(fleet=fleet, gateway=gateway)
        save_snapshot(session)
    else:
        session = MenuSession(fleet=gateway.load_snapshot(), gateway=gateway)

    menu.run(session)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
