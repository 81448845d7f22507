"""
litcal.engines.patterns
-----------------------
Resolves the symbolic date patterns used by lectionary import data
("advent_2", "lent_3", "proper_17", ...) to concrete dates of the liturgical
year beginning at Advent of a civil year.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Dict, List, Sequence, Tuple, Union

from litcal.core.errors import UnknownDatePattern
from litcal.core.time import add_days, sunday_after
from litcal.core.types import EasterDates, ProperSunday
from .anchors import EpiphanySundayConvention, baptism_of_the_lord, first_sunday_of_advent
from .propers import FIRST_PROPER, LAST_PROPER, proper_sundays
from .seasons import compute_seasons, easter_dates_for

_NUMBERED = re.compile(r"^(advent|epiphany|lent|easter|proper)_(\d+)$")

# Allowed ordinals per numbered family.
_RANGES: Dict[str, Tuple[int, int]] = {
    "advent": (1, 4),
    "epiphany": (2, 9),
    "lent": (1, 5),
    "easter": (2, 7),
    "proper": (FIRST_PROPER, LAST_PROPER),
}

# Easter-relative named days.
_EASTER_FIELDS: Dict[str, str] = {
    "ash_wednesday": "ash_wednesday",
    "palm_sunday": "palm_sunday",
    "maundy_thursday": "maundy_thursday",
    "good_friday": "good_friday",
    "easter_vigil": "easter_vigil",
    "easter_day": "easter",
    "ascension": "ascension",
    "pentecost": "pentecost",
    "trinity_sunday": "trinity_sunday",
    "corpus_christi": "corpus_christi",
    "christ_king": "christ_the_king",
}


def _fixed(civil_year: int) -> Dict[str, Callable[[], date]]:
    return {
        "december_24": lambda: date(civil_year, 12, 24),
        "december_25": lambda: date(civil_year, 12, 25),
        "christmas_1": lambda: sunday_after(date(civil_year, 12, 25)),
        "january_6": lambda: date(civil_year + 1, 1, 6),
    }


def _numbered_sunday(
    pattern: str,
    n: int,
    sundays: Sequence[ProperSunday],
    before_lent: bool,
    ed: EasterDates,
) -> date:
    """Ordinary Time Sunday n, only if that number is used in this year."""
    for ps in sundays:
        if ps.number == n and (ps.date < ed.ash_wednesday) == before_lent:
            return ps.date
    raise UnknownDatePattern(f"Pattern '{pattern}' is not used in this liturgical year")


def _numbered(
    pattern: str,
    family: str,
    n: int,
    civil_year: int,
    ed: EasterDates,
    convention: Union[str, EpiphanySundayConvention],
) -> date:
    if family == "advent":
        return add_days(first_sunday_of_advent(civil_year), 7 * (n - 1))
    if family == "lent":
        # Lent 1 is the Sunday after Ash Wednesday.
        return add_days(ed.ash_wednesday, 4 + 7 * (n - 1))
    if family == "easter":
        return add_days(ed.easter, 7 * (n - 1))
    # epiphany_N and proper_N follow the year's Ordinary Time numbering.
    sundays = proper_sundays(compute_seasons(civil_year, ed, convention), ed)
    return _numbered_sunday(pattern, n, sundays, family == "epiphany", ed)


def resolve_pattern(
    pattern: str,
    civil_year: int,
    convention: Union[str, EpiphanySundayConvention] = EpiphanySundayConvention.NEXT_SUNDAY,
) -> date:
    """
    Date of `pattern` in the liturgical year beginning at Advent of civil_year.

    Raises UnknownDatePattern for keys outside the supported vocabulary,
    numbered keys outside their range, and Epiphany or Proper Sundays that
    the year does not use.
    """
    key = pattern.strip().lower()
    fixed = _fixed(civil_year)
    if key in fixed:
        return fixed[key]()

    ed = easter_dates_for(civil_year)
    if key in _EASTER_FIELDS:
        return getattr(ed, _EASTER_FIELDS[key])

    if key == "baptism_lord":
        return baptism_of_the_lord(civil_year + 1, convention)
    if key == "transfiguration":
        # Last Sunday before Lent in the RCL.
        return add_days(ed.ash_wednesday, -3)

    m = _NUMBERED.match(key)
    if m:
        family, n = m.group(1), int(m.group(2))
        lo, hi = _RANGES[family]
        if lo <= n <= hi:
            return _numbered(pattern, family, n, civil_year, ed, convention)
        raise UnknownDatePattern(f"Pattern '{pattern}' out of range ({family}_{lo}..{family}_{hi})")

    raise UnknownDatePattern(f"Unknown date pattern '{pattern}'")


def known_patterns() -> List[str]:
    names = list(_fixed(2000)) + list(_EASTER_FIELDS) + ["baptism_lord", "transfiguration"]
    for family, (lo, hi) in _RANGES.items():
        names.extend(f"{family}_{n}" for n in range(lo, hi + 1))
    return sorted(names)
