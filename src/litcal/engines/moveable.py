"""
litcal.engines.moveable
-----------------------
Easter-relative moveable feasts.

Christ the King is not an Easter offset. It is the Sunday before the next
Advent and is passed in by the caller that knows that Advent.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from litcal.core.time import add_days
from litcal.core.types import EasterDates

MOVEABLE_OFFSETS: Dict[str, int] = {
    "ash_wednesday": -46,
    "palm_sunday": -7,
    "maundy_thursday": -3,
    "good_friday": -2,
    "easter_vigil": -1,
    "ascension": 39,
    "pentecost": 49,
    "trinity_sunday": 56,
    "corpus_christi": 60,
}


def derive_easter_dates(easter: date, christ_the_king: Optional[date] = None) -> EasterDates:
    """
    Build the eleven-date bundle for one Easter.

    When christ_the_king is omitted it is taken from the Advent that closes
    the liturgical year containing this Easter.
    """
    if christ_the_king is None:
        from .anchors import christ_the_king as _ctk
        christ_the_king = _ctk(easter.year)

    fields = {name: add_days(easter, off) for name, off in MOVEABLE_OFFSETS.items()}
    return EasterDates(easter=easter, christ_the_king=christ_the_king, **fields)
