"""
litcal.engines.seasons
----------------------
Partitions one liturgical year into its six contiguous seasons.

The year that begins at Advent of civil year Y takes its Easter from Y + 1
and ends on the eve of the Advent of Y + 1. All bounds are inclusive.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Tuple, Union

from litcal.config import check_year
from litcal.core.time import add_days
from litcal.core.types import EasterDates, Season
from .anchors import EpiphanySundayConvention, baptism_of_the_lord, first_sunday_of_advent
from .easter import compute_easter
from .moveable import derive_easter_dates

ADVENT = "Advent"
CHRISTMAS = "Christmas"
ORDINARY_TIME = "Ordinary Time"
LENT = "Lent"
EASTER = "Easter"

# Position of each season in the tuple returned by compute_seasons.
ADVENT_IX, CHRISTMAS_IX, ORDINARY_I_IX, LENT_IX, EASTER_IX, ORDINARY_II_IX = range(6)


def easter_dates_for(civil_year: int) -> EasterDates:
    """Moveable dates of the liturgical year beginning at Advent of civil_year."""
    easter = compute_easter(civil_year + 1)
    ctk = add_days(first_sunday_of_advent(civil_year + 1), -7)
    return derive_easter_dates(easter, ctk)


def compute_seasons(
    civil_year: int,
    easter_dates: Optional[EasterDates] = None,
    convention: Union[str, EpiphanySundayConvention] = EpiphanySundayConvention.NEXT_SUNDAY,
) -> Tuple[Season, ...]:
    Y = check_year(civil_year)
    check_year(Y + 1)
    ed = easter_dates if easter_dates is not None else easter_dates_for(Y)

    advent = first_sunday_of_advent(Y)
    next_advent = first_sunday_of_advent(Y + 1)
    baptism = baptism_of_the_lord(Y + 1, convention)

    # Ordinary Time I may be empty (end = start - 1) when Lent starts early.
    ot1_start = add_days(baptism, 1)
    ot1_end = max(add_days(ed.ash_wednesday, -1), add_days(ot1_start, -1))

    return (
        Season(ADVENT, "purple", advent, date(Y, 12, 24), "penitential"),
        Season(CHRISTMAS, "white", date(Y, 12, 25), baptism, "festive"),
        Season(ORDINARY_TIME, "green", ot1_start, ot1_end, "ordinary"),
        Season(LENT, "purple", ed.ash_wednesday, ed.easter_vigil, "penitential"),
        Season(EASTER, "white", ed.easter, ed.pentecost, "festive"),
        Season(ORDINARY_TIME, "green", add_days(ed.pentecost, 1), add_days(next_advent, -1), "ordinary"),
    )


def season_index(seasons: Sequence[Season], d: date) -> Optional[int]:
    for i, s in enumerate(seasons):
        if s.contains(d):
            return i
    return None
