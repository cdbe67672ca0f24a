"""Shared pytest fixtures for fleetledger tests."""

from decimal import Decimal
from pathlib import Path
import pytest

from fleetledger.database.factories import create_sqlite_database
from fleetledger.domain.entities import Boat, BoatType
from fleetledger.domain.fleet import Fleet
from fleetledger.domain.gateway import PersistenceGateway


@pytest.fixture
def db_path(tmp_path):
    """Return a snapshot path inside a temporary directory."""
    return str(tmp_path / "FleetData.db")


@pytest.fixture
def temp_db(db_path):
    """Create a snapshot database on a temporary path."""
    return create_sqlite_database(database_path=db_path)


@pytest.fixture
def gateway(temp_db):
    """Create a PersistenceGateway over the temporary snapshot database."""
    return PersistenceGateway(temp_db)


@pytest.fixture
def marlin():
    """A power boat with no expense yet."""
    return Boat(
        boat_type=BoatType.POWER,
        name="Marlin",
        year=2015,
        make="Boston Whaler",
        feet=22.0,
        purchase_price=Decimal("35000.00"),
    )


@pytest.fixture
def sample_fleet(marlin):
    """Create a fleet of two boats, one with some expense recorded."""
    osprey = Boat(
        boat_type=BoatType.SAILING,
        name="Osprey",
        year=1998,
        make="Hunter",
        feet=27.5,
        purchase_price=Decimal("18500"),
        expense=Decimal("1250.25"),
    )
    return Fleet([marlin, osprey])


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
