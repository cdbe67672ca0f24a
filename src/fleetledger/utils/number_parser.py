"""Parsers for the whole and real number fields of a boat record."""

import math


def parse_year(year_str: str) -> int:
    """Parse a model year.

    Raises:
        ValueError: If the text is not a whole number
    """
    try:
        return int(year_str.strip())
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Could not parse year '{year_str}'") from e


def parse_feet(feet_str: str) -> float:
    """Parse a boat length in feet.

    Raises:
        ValueError: If the text is not a finite, non-negative number
    """
    try:
        feet = float(feet_str.strip())
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Could not parse length '{feet_str}'") from e

    if not math.isfinite(feet):
        raise ValueError(f"Length must be a finite number: '{feet_str}'")
    if feet < 0:
        raise ValueError(f"Length must not be negative: '{feet_str}'")
    return feet
