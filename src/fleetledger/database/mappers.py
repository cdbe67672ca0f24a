"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal, InvalidOperation

from fleetledger.domain import entities as domain
from fleetledger.database.models import Boat as ORMBoat


def boat_to_domain(orm_boat: ORMBoat) -> domain.Boat:
    """Convert SQLAlchemy Boat model to domain Boat entity.

    Raises:
        ValueError: If the stored row does not describe a valid boat
    """
    try:
        purchase_price = Decimal(orm_boat.purchase_price)
        expense = Decimal(orm_boat.expense)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Stored boat '{orm_boat.name}' has an invalid amount") from e

    return domain.Boat(
        boat_type=domain.BoatType.from_str(orm_boat.boat_type),
        name=orm_boat.name,
        year=orm_boat.year,
        make=orm_boat.make,
        feet=orm_boat.feet,
        purchase_price=purchase_price,
        expense=expense,
    )


def boat_to_orm(boat: domain.Boat, position: int) -> ORMBoat:
    """Convert domain Boat entity to a SQLAlchemy Boat model at ``position``."""
    return ORMBoat(
        position=position,
        boat_type=boat.boat_type.value,
        name=boat.name,
        year=boat.year,
        make=boat.make,
        feet=boat.feet,
        purchase_price=str(boat.purchase_price),
        expense=str(boat.expense),
    )
