"""Fleet ledger domain service."""

from decimal import Decimal
from typing import Iterable, Iterator, Optional, Sequence

from fleetledger.domain.entities import Boat, BoatType
from fleetledger.domain.errors import (
    BudgetExceededError,
    InvalidInputError,
    NotFoundError,
    boat_not_found,
    wrong_field_count,
)
from fleetledger.logging_utils import get_logger
from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.number_parser import parse_feet, parse_year

logger = get_logger(__name__)

FIELD_COUNT = 6


def build_boat(fields: Sequence[str]) -> Boat:
    """Build a boat from its six text fields.

    Fields are, in order: category, name, year, make, feet, purchase price.
    Non-text values such as an int year are read through their text form.
    The new boat starts with no expense.

    Args:
        fields: Raw field values, surrounding whitespace is ignored

    Returns:
        Boat entity

    Raises:
        InvalidInputError: If the field count is wrong or a field fails to parse
    """
    if len(fields) != FIELD_COUNT:
        raise InvalidInputError(wrong_field_count(len(fields)))

    category, name, year, make, feet, price = (str(field).strip() for field in fields)
    try:
        return Boat(
            boat_type=BoatType.from_str(category),
            name=name,
            year=parse_year(year),
            make=make,
            feet=parse_feet(feet),
            purchase_price=parse_amount(price),
        )
    except ValueError as e:
        raise InvalidInputError(str(e)) from e


class Fleet:
    """Ordered collection of boats with expense tracking.

    Boats keep their insertion order, which is also the report order. Names
    are matched case-insensitively and the first match wins.
    """

    def __init__(self, boats: Optional[Iterable[Boat]] = None):
        """Initialize fleet.

        Args:
            boats: Initial boats, in order
        """
        self._boats: list[Boat] = list(boats) if boats is not None else []

    def __iter__(self) -> Iterator[Boat]:
        return iter(list(self._boats))

    def __len__(self) -> int:
        return len(self._boats)

    @property
    def boats(self) -> list[Boat]:
        """Return a copy of the boats in fleet order."""
        return list(self._boats)

    def find(self, name: str) -> Optional[Boat]:
        """Return the first boat whose name matches case-insensitively."""
        wanted = name.casefold()
        for boat in self._boats:
            if boat.name.casefold() == wanted:
                return boat
        return None

    def append(self, boat: Boat) -> None:
        """Append an already built boat."""
        self._boats.append(boat)
        logger.debug("Added boat '%s' (%d in fleet)", boat.name, len(self._boats))

    def add_boat(
        self,
        category: str,
        name: str,
        year: str,
        make: str,
        feet: str,
        purchase_price: str,
    ) -> Boat:
        """Add a new boat with zero expense.

        No duplicate-name check is made.

        Returns:
            The new boat

        Raises:
            InvalidInputError: If the category is unknown or a number fails to parse
        """
        boat = build_boat([category, name, year, make, feet, purchase_price])
        self.append(boat)
        return boat

    def remove_boat(self, name: str) -> Boat:
        """Remove the first boat matching ``name``.

        Returns:
            The removed boat

        Raises:
            NotFoundError: If no boat matches
        """
        boat = self.find(name)
        if boat is None:
            raise NotFoundError(boat_not_found(name))

        # Remove by identity, equal records may exist
        for index, candidate in enumerate(self._boats):
            if candidate is boat:
                del self._boats[index]
                break
        logger.debug("Removed boat '%s'", boat.name)
        return boat

    def record_expense(self, name: str, amount: Decimal | float | str) -> Decimal:
        """Spend ``amount`` on the first boat matching ``name``.

        An amount equal to the remaining budget is allowed; anything above it
        is rejected without changing the boat.

        Args:
            name: Boat name
            amount: Non-negative expense amount, read through its text form

        Returns:
            The boat's new accumulated expense

        Raises:
            NotFoundError: If no boat matches
            InvalidInputError: If the amount is negative or not a number
            BudgetExceededError: If the amount exceeds the remaining budget
        """
        boat = self.find(name)
        if boat is None:
            raise NotFoundError(boat_not_found(name))
        try:
            amount = parse_amount(str(amount))
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        remaining = boat.remaining_budget
        if amount > remaining:
            logger.info(
                "Rejected expense of %s on '%s', %s remaining", amount, boat.name, remaining
            )
            raise BudgetExceededError(remaining)

        boat.expense += amount
        logger.debug("Recorded expense of %s on '%s', total %s", amount, boat.name, boat.expense)
        return boat.expense

    def total_paid(self) -> Decimal:
        """Sum of purchase prices over all boats."""
        return sum((boat.purchase_price for boat in self._boats), Decimal("0"))

    def total_spent(self) -> Decimal:
        """Sum of accumulated expenses over all boats."""
        return sum((boat.expense for boat in self._boats), Decimal("0"))

    def report(self) -> Iterator[str]:
        """Yield one formatted line per boat followed by a totals line.

        Each call starts over from the current state of the fleet.
        """
        for boat in list(self._boats):
            yield str(boat)
        yield (
            f"{'Total':<53} : Paid ${self.total_paid():>10.2f} : Spent ${self.total_spent():>10.2f}"
        )
