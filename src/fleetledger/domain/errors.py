"""Shared domain error messages and error types."""

from decimal import Decimal
from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class InvalidInputError(DomainError):
    """Boat fields or an expense amount could not be parsed or validated."""


class NotFoundError(DomainError):
    """No boat in the fleet matches the requested name."""


class BudgetExceededError(DomainError):
    """An expense would push a boat's spending past its purchase price."""

    def __init__(self, remaining: Decimal):
        super().__init__(expense_not_permitted(remaining))
        self.remaining = remaining


class FleetImportError(DomainError):
    """An import source could not be read or contains a malformed line."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class PersistenceError(DomainError):
    """The fleet snapshot could not be read or written."""


def boat_not_found(name: str) -> str:
    """Return message for a name lookup miss."""
    return f"Cannot find boat {name}"


def expense_not_permitted(remaining: Decimal) -> str:
    """Return message for an expense rejected by the budget check."""
    return f"Expense not permitted, only ${remaining:.2f} left to spend."


def wrong_field_count(count: int) -> str:
    """Return message for a boat line with the wrong number of fields."""
    return f"Expected 6 comma-separated fields, got {count}"
