"""Tests for domain entities."""

import pytest
from decimal import Decimal

from fleetledger.domain.entities import Boat, BoatType


class TestBoatType:
    """Tests for BoatType parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("POWER", BoatType.POWER),
            ("power", BoatType.POWER),
            (" Sailing ", BoatType.SAILING),
        ],
    )
    def test_from_str_ignores_case_and_whitespace(self, text, expected):
        """Category tokens match case-insensitively."""
        assert BoatType.from_str(text) is expected

    def test_from_str_rejects_unknown(self):
        """Unknown categories raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported boat type"):
            BoatType.from_str("ROWING")


class TestBoat:
    """Tests for Boat entity."""

    def test_new_boat_has_no_expense(self, marlin):
        """Expense defaults to zero."""
        assert marlin.expense == Decimal("0")
        assert marlin.remaining_budget == Decimal("35000.00")

    def test_str_formats_report_columns(self, marlin):
        """String form lines up type, name, year, make, feet and money."""
        marlin.expense = Decimal("1500.5")
        line = str(marlin)

        assert line.startswith("POWER    Marlin               2015 Boston Whaler   22' : ")
        assert line.endswith(": Paid $  35000.00 : Spent $   1500.50")

    def test_str_truncates_feet(self):
        """Feet are shown as a whole number."""
        boat = Boat(
            boat_type=BoatType.SAILING,
            name="Osprey",
            year=1998,
            make="Hunter",
            feet=27.9,
            purchase_price=Decimal("18500"),
        )
        assert "  27' :" in str(boat)

    def test_boat_equality(self, marlin):
        """Boats with equal fields compare equal."""
        other = Boat(
            boat_type=BoatType.POWER,
            name="Marlin",
            year=2015,
            make="Boston Whaler",
            feet=22.0,
            purchase_price=Decimal("35000.00"),
        )
        assert marlin == other
