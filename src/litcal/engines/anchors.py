"""
litcal.engines.anchors
----------------------
Season anchors that do not depend on Easter: the First Sunday of Advent and
the Baptism of the Lord.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Union

from litcal.config import check_year
from litcal.core.errors import AmbiguousAnchor
from litcal.core.time import add_days, weekday


class EpiphanySundayConvention(str, Enum):
    """
    Placement of the Baptism of the Lord when January 6 is itself a Sunday.

    NEXT_SUNDAY keeps the feast on a Sunday (January 13). FOLLOWING_MONDAY
    moves it to Monday, January 7, as some national calendars do.
    """
    NEXT_SUNDAY = "next_sunday"
    FOLLOWING_MONDAY = "following_monday"

    @classmethod
    def parse(cls, value: Union[str, "EpiphanySundayConvention"]) -> "EpiphanySundayConvention":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower().replace("-", "_"))
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise AmbiguousAnchor(
                f"Unknown Epiphany-Sunday convention {value!r}; choose one of: {choices}"
            ) from None


def first_sunday_of_advent(civil_year: int) -> date:
    """The Sunday in [Nov 27, Dec 3], i.e. the Sunday nearest St Andrew (Nov 30)."""
    nov30 = date(check_year(civil_year), 11, 30)
    w = weekday(nov30)
    if w == 0:
        return nov30
    if w <= 3:
        return add_days(nov30, -w)
    return add_days(nov30, 7 - w)


def baptism_of_the_lord(
    civil_year: int,
    convention: Union[str, EpiphanySundayConvention] = EpiphanySundayConvention.NEXT_SUNDAY,
) -> date:
    """First Sunday strictly after Epiphany (Jan 6), see EpiphanySundayConvention."""
    conv = EpiphanySundayConvention.parse(convention)
    epiphany = date(check_year(civil_year), 1, 6)
    w = weekday(epiphany)
    if w == 0 and conv is EpiphanySundayConvention.FOLLOWING_MONDAY:
        return add_days(epiphany, 1)
    return add_days(epiphany, 7 - w)


def christ_the_king(civil_year: int) -> date:
    """Last Sunday before the Advent that begins in civil_year."""
    return add_days(first_sunday_of_advent(civil_year), -7)
