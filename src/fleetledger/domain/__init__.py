"""Domain layer for fleetledger application."""

from fleetledger.domain.fleet import Fleet
from fleetledger.domain.csv_import import FleetImportService

__all__ = [
    "Fleet",
    "FleetImportService",
]
