"""SQLite snapshot database implementation."""

import os
import tempfile
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleetledger.database.base import Database
from fleetledger.database.mappers import boat_to_domain, boat_to_orm
from fleetledger.database.models import Base, Boat, create_sqlite_engine
from fleetledger.domain import entities
from fleetledger.domain.errors import PersistenceError
from fleetledger.logging_utils import get_logger

logger = get_logger(__name__)


class SQLiteDatabase(Database):
    """SQLite implementation of the snapshot Database interface.

    Each save builds a fresh database file beside the target and moves it into
    place, so the previous snapshot is replaced as a whole.
    """

    def __init__(self, database_path: str):
        """Initialize SQLite snapshot database.

        Args:
            database_path: Path to the snapshot file
        """
        self.database_path = database_path

    def load_fleet(self) -> list[entities.Boat]:
        """Load all boats of the last snapshot, in fleet order."""
        if not Path(self.database_path).is_file():
            raise PersistenceError(f"Snapshot not found: {self.database_path}")

        engine = create_sqlite_engine(self.database_path)
        try:
            with Session(engine) as session:
                rows = session.query(Boat).order_by(Boat.position).all()
                boats = [boat_to_domain(row) for row in rows]
        except (SQLAlchemyError, ValueError) as e:
            raise PersistenceError(f"Could not read snapshot {self.database_path}: {e}") from e
        finally:
            engine.dispose()

        logger.info("Loaded %d boats from %s", len(boats), self.database_path)
        return boats

    def save_fleet(self, boats: list[entities.Boat]) -> None:
        """Replace the snapshot with ``boats``, in the given order."""
        target = Path(self.database_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(suffix=".db", dir=target.parent)
            os.close(fd)
        except OSError as e:
            raise PersistenceError(f"Could not write snapshot {target}: {e}") from e

        engine = create_sqlite_engine(temp_path)
        try:
            Base.metadata.create_all(engine)
            with Session(engine) as session:
                session.add_all(
                    [boat_to_orm(boat, position) for position, boat in enumerate(boats)]
                )
                session.commit()
            engine.dispose()
            os.replace(temp_path, target)
        except (SQLAlchemyError, OSError) as e:
            engine.dispose()
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise PersistenceError(f"Could not write snapshot {target}: {e}") from e

        logger.info("Saved %d boats to %s", len(boats), target)
