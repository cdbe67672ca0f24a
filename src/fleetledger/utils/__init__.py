"""Utility functions for fleetledger."""

from fleetledger.utils.amount_parser import parse_amount
from fleetledger.utils.number_parser import parse_feet, parse_year

__all__ = ["parse_amount", "parse_feet", "parse_year"]
