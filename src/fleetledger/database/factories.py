"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from fleetledger.database.sqlite import SQLiteDatabase

DB_PATH_ENV = "FLEETLEDGER_DB_PATH"
DEFAULT_DB_NAME = "FleetData.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLiteDatabase:
    """Create a SQLite snapshot database instance.

    Args:
        database_path: Path to the snapshot file. If None, checks FLEETLEDGER_DB_PATH
            environment variable, then defaults to ~/.fleetledger/FleetData.db

    Returns:
        SQLiteDatabase instance
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        # Default to ~/.fleetledger/FleetData.db
        home = Path.home()
        db_dir = home / ".fleetledger"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / DEFAULT_DB_NAME)

    return SQLiteDatabase(database_path)
