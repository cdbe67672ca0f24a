"""Abstract snapshot database interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from fleetledger.domain.entities import Boat


class Database(ABC):
    """Abstract snapshot store for a fleet."""

    @abstractmethod
    def load_fleet(self) -> list[Boat]:
        """Load all boats of the last snapshot, in fleet order.

        Raises:
            PersistenceError: If no readable snapshot exists
        """
        pass

    @abstractmethod
    def save_fleet(self, boats: list[Boat]) -> None:
        """Replace the snapshot with ``boats``, in the given order.

        Raises:
            PersistenceError: If the snapshot cannot be written
        """
        pass
