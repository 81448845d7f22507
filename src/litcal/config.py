"""Configuration constants and environment lookups for litcal."""

from __future__ import annotations

import os

from .core.errors import InvalidYearRange

# Domain of the anonymous Gregorian algorithm.
MIN_YEAR = 1583
MAX_YEAR = 4099

DEFAULT_TRADITION_ENV = "LITCAL_DEFAULT_TRADITION"
FALLBACK_TRADITION = "rcl"


def default_tradition() -> str:
    """Name of the tradition used when a caller does not pass one.

    Returns:
        The value of `LITCAL_DEFAULT_TRADITION`, or "rcl" when unset or blank.
    """
    if not (name := os.environ.get(DEFAULT_TRADITION_ENV, "").strip()):
        return FALLBACK_TRADITION
    return name.lower()


def check_year(year: int, *, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR) -> int:
    """Return year unchanged, or raise InvalidYearRange."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be an int, got {type(year).__name__}")
    if not (min_year <= year <= max_year):
        raise InvalidYearRange(year, min_year, max_year)
    return year
