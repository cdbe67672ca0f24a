"""Domain model entities for fleetledger.

These are plain data classes representing the boats of a fleet, independent
of the snapshot schema used to persist them.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BoatType(str, Enum):
    """Category of a boat."""

    POWER = "POWER"
    SAILING = "SAILING"

    @classmethod
    def from_str(cls, value: str) -> "BoatType":
        """Coerce arbitrary casing into a valid boat type."""
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported boat type: {value}") from error


@dataclass
class Boat:
    """Boat domain entity.

    ``expense`` is the only field that changes after creation; it is raised
    through ``Fleet.record_expense`` which keeps it at or below
    ``purchase_price``.
    """

    boat_type: BoatType
    name: str
    year: int
    make: str
    feet: float
    purchase_price: Decimal
    expense: Decimal = Decimal("0")

    @property
    def remaining_budget(self) -> Decimal:
        """Amount that may still be spent on this boat."""
        return self.purchase_price - self.expense

    def __str__(self) -> str:
        return (
            f"{self.boat_type.value:<8} {self.name:<20} {self.year:>4} {self.make:<12} "
            f"{int(self.feet):>4}' : Paid ${self.purchase_price:>10.2f} : Spent ${self.expense:>10.2f}"
        )
