"""litcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    build_year,
    current_info,
    day_info,
    easter,
    explain,
    list_traditions,
    tradition_info,
    make_engine,
    register_tradition,
    liturgical_year_of,
    season_containing,
    proper_number_for,
    special_days_in_range,
    sunday_for_pattern,
)
from .core.errors import AmbiguousAnchor, InvalidYearRange, LitcalError, UnknownDatePattern, UnknownTradition
from .core.types import EasterDates, LiturgicalYearInfo, ProperSunday, Season, SpecialDay

__all__ = [
    "build_year",
    "current_info",
    "day_info",
    "easter",
    "explain",
    "list_traditions",
    "tradition_info",
    "make_engine",
    "register_tradition",
    "liturgical_year_of",
    "season_containing",
    "proper_number_for",
    "special_days_in_range",
    "sunday_for_pattern",
    "AmbiguousAnchor",
    "InvalidYearRange",
    "LitcalError",
    "UnknownDatePattern",
    "UnknownTradition",
    "EasterDates",
    "LiturgicalYearInfo",
    "ProperSunday",
    "Season",
    "SpecialDay",
]
