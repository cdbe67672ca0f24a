"""Domain tests for the CSV import service."""

import pytest
from decimal import Decimal

from fleetledger.domain.csv_import import FleetImportService
from fleetledger.domain.entities import BoatType
from fleetledger.domain.errors import FleetImportError


def test_import_file_preserves_order(fixtures_dir):
    """Every line becomes a boat with zero expense, in file order."""
    fleet = FleetImportService().import_file(str(fixtures_dir / "fleet.csv"))

    assert [boat.name for boat in fleet] == ["Marlin", "Osprey", "Windward"]
    assert [boat.boat_type for boat in fleet] == [
        BoatType.POWER,
        BoatType.SAILING,
        BoatType.SAILING,
    ]
    assert all(boat.expense == Decimal("0") for boat in fleet)
    assert fleet.total_paid() == Decimal("95500.50")


def test_import_single_line_scenario(tmp_path):
    csv_path = tmp_path / "marlin.csv"
    csv_path.write_text("POWER,Marlin,2015,Boston Whaler,22,35000.00\n", encoding="utf-8")

    fleet = FleetImportService().import_file(str(csv_path))

    assert fleet.total_paid() == Decimal("35000.00")
    assert fleet.total_spent() == Decimal("0")


def test_import_skips_blank_lines(tmp_path):
    csv_path = tmp_path / "blank_lines.csv"
    csv_path.write_text(
        "\nPOWER,Marlin,2015,Boston Whaler,22,35000.00\n\n   \n",
        encoding="utf-8",
    )

    fleet = FleetImportService().import_file(str(csv_path))

    assert len(fleet) == 1


def test_import_bad_category_raises(fixtures_dir):
    """An unknown category aborts the import and names the line."""
    with pytest.raises(FleetImportError) as excinfo:
        FleetImportService().import_file(str(fixtures_dir / "fleet_bad_category.csv"))

    assert excinfo.value.line_number == 2
    assert "Line 2" in str(excinfo.value)
    assert "ROWING" in str(excinfo.value)


def test_import_wrong_field_count_raises(fixtures_dir):
    with pytest.raises(FleetImportError) as excinfo:
        FleetImportService().import_file(str(fixtures_dir / "fleet_missing_field.csv"))

    assert excinfo.value.line_number == 2
    assert "got 5" in str(excinfo.value)


def test_import_non_numeric_field_raises(tmp_path):
    csv_path = tmp_path / "bad_price.csv"
    csv_path.write_text("POWER,Marlin,2015,Boston Whaler,22,a lot\n", encoding="utf-8")

    with pytest.raises(FleetImportError, match="Line 1"):
        FleetImportService().import_file(str(csv_path))


def test_import_missing_file_raises(tmp_path):
    with pytest.raises(FleetImportError, match="Could not read"):
        FleetImportService().import_file(str(tmp_path / "missing.csv"))


def test_import_undecodable_file_raises(fixtures_dir):
    """Bytes that are not UTF-8 are reported as an import error."""
    with pytest.raises(FleetImportError, match="Could not decode"):
        FleetImportService().import_file(str(fixtures_dir / "fleet_bad_encoding.csv"))


def test_import_quoted_comma_is_not_one_field(fixtures_dir):
    """Quotes carry no meaning, so a comma inside them still splits fields."""
    with pytest.raises(FleetImportError) as excinfo:
        FleetImportService().import_file(str(fixtures_dir / "fleet_quoted_name.csv"))

    assert excinfo.value.line_number == 1
    assert "got 7" in str(excinfo.value)


def test_import_stray_quote_stays_on_its_line(tmp_path):
    """An unbalanced quote does not pull later lines into the record."""
    csv_path = tmp_path / "stray_quote.csv"
    csv_path.write_text(
        'POWER,"Marlin,2015,Boston Whaler,22,35000.00\n'
        "SAILING,Osprey,1998,Hunter,27.5,18500\n",
        encoding="utf-8",
    )

    fleet = FleetImportService().import_file(str(csv_path))

    assert [boat.name for boat in fleet] == ['"Marlin', "Osprey"]
