"""CSV import domain service."""

from pathlib import Path

from fleetledger.domain.errors import FleetImportError, InvalidInputError
from fleetledger.domain.fleet import Fleet, build_boat
from fleetledger.logging_utils import get_logger

logger = get_logger(__name__)


class FleetImportService:
    """Service for seeding a fleet from a headerless CSV file.

    Each non-blank line holds ``category,name,year,make,feet,purchasePrice``,
    split on every comma with no quoting, the same grammar the Add command
    accepts.
    """

    def import_file(self, csv_file_path: str) -> Fleet:
        """Import boats from a CSV file.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            Fleet holding the imported boats in file order, all with zero expense

        Raises:
            FleetImportError: If the file cannot be read or decoded, or any line is malformed
        """
        csv_path = Path(csv_file_path)
        fleet = Fleet()

        try:
            with open(csv_path, "r", encoding="utf-8-sig") as f:
                for line_number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    try:
                        fleet.append(build_boat(line.rstrip("\r\n").split(",")))
                    except InvalidInputError as e:
                        raise FleetImportError(str(e), line_number=line_number) from e
        except UnicodeDecodeError as e:
            raise FleetImportError(f"Could not decode {csv_file_path}: {e}") from e
        except OSError as e:
            raise FleetImportError(f"Could not read {csv_file_path}: {e}") from e

        logger.info("Imported %d boats from %s", len(fleet), csv_path)
        return fleet
