"""Persistence gateway: start-up loading and snapshot saving for a fleet."""

from fleetledger.database.base import Database
from fleetledger.domain.csv_import import FleetImportService
from fleetledger.domain.errors import PersistenceError
from fleetledger.domain.fleet import Fleet
from fleetledger.logging_utils import get_logger

logger = get_logger(__name__)


class PersistenceGateway:
    """Moves a fleet between the import source, the snapshot and memory."""

    def __init__(self, db: Database):
        """Initialize persistence gateway.

        Args:
            db: Snapshot database
        """
        self.db = db
        self.import_service = FleetImportService()

    def import_fleet(self, csv_file_path: str) -> Fleet:
        """Build a fleet from an import source.

        Raises:
            FleetImportError: If the source is unreadable or malformed
        """
        return self.import_service.import_file(csv_file_path)

    def load_snapshot(self) -> Fleet:
        """Load the saved fleet, or an empty fleet when none can be read."""
        try:
            return Fleet(self.db.load_fleet())
        except PersistenceError as e:
            logger.warning("Starting with an empty fleet: %s", e)
            return Fleet()

    def save_snapshot(self, fleet: Fleet) -> None:
        """Write the whole fleet to the snapshot, replacing any earlier one.

        Raises:
            PersistenceError: If the snapshot cannot be written
        """
        self.db.save_fleet(fleet.boats)
