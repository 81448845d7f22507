"""
litcal.engines.builder
----------------------
Composes Easter, anchors, seasons, Propers and feasts into one
LiturgicalYearInfo. Everything here is a pure function of the year and the
tradition spec; nothing is cached.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence

from litcal.config import check_year
from litcal.core.time import add_days, sunday_after, weekday
from litcal.core.types import EasterDates, LiturgicalYearInfo, Season, SpecialDay
from .anchors import first_sunday_of_advent
from .cycle import cycle_for, daily_office_year
from .fixed import fixed_feasts_for
from .propers import number_seasons, proper_sundays
from .seasons import CHRISTMAS_IX, compute_seasons, easter_dates_for
from .specs import ALL_SPECS, TraditionSpec

logger = logging.getLogger(__name__)

# (name, EasterDates field, type, rank, color)
MOVEABLE_FEASTS = (
    ("Ash Wednesday", "ash_wednesday", "fast", 8, "purple"),
    ("Palm Sunday", "palm_sunday", "feast", 8, "red"),
    ("Maundy Thursday", "maundy_thursday", "feast", 9, "white"),
    ("Good Friday", "good_friday", "fast", 10, "red"),
    ("Easter Vigil", "easter_vigil", "solemnity", 10, "white"),
    ("Easter Sunday", "easter", "solemnity", 10, "white"),
    ("Ascension of the Lord", "ascension", "solemnity", 9, "white"),
    ("Pentecost", "pentecost", "solemnity", 9, "red"),
    ("Trinity Sunday", "trinity_sunday", "solemnity", 8, "white"),
    ("Corpus Christi", "corpus_christi", "solemnity", 8, "white"),
    ("Christ the King", "christ_the_king", "solemnity", 8, "white"),
)


def holy_family(civil_year: int) -> date:
    """Sunday within the Octave of Christmas, or December 30 when there is none."""
    christmas = date(civil_year, 12, 25)
    if weekday(christmas) == 0:
        return date(civil_year, 12, 30)
    return sunday_after(christmas)


def moveable_feasts(ed: EasterDates, seasons: Sequence[Season]) -> List[SpecialDay]:
    out = [
        SpecialDay(name, getattr(ed, attr), kind, rank, color, True)
        for name, attr, kind, rank, color in MOVEABLE_FEASTS
    ]
    advent_year = seasons[0].start_date.year
    out.append(SpecialDay("Holy Family", holy_family(advent_year), "feast", 7, "white", True))
    out.append(SpecialDay("Baptism of the Lord", seasons[CHRISTMAS_IX].end_date, "feast", 7, "white", True))
    return out


def _sort_key(sd: SpecialDay):
    return (sd.date, -sd.rank, sd.name)


def build(civil_year: int, spec: Optional[TraditionSpec] = None) -> LiturgicalYearInfo:
    """
    Liturgical year beginning at Advent of civil_year.

    Raises InvalidYearRange when civil_year or civil_year + 1 lies outside
    the Gregorian domain; no partial result is produced.
    """
    spec = spec if spec is not None else ALL_SPECS["rcl"]
    if spec.is_composite:
        raise TypeError(f"Tradition '{spec.name}' is composite; build its components instead")
    Y = check_year(civil_year)
    check_year(Y + 1)

    ed = easter_dates_for(Y)
    seasons = compute_seasons(Y, ed, spec.convention)
    sundays = proper_sundays(seasons, ed, spec.labels)
    seasons = number_seasons(seasons, sundays)

    start = seasons[0].start_date
    end = add_days(first_sunday_of_advent(Y + 1), -1)
    candidates = fixed_feasts_for(Y) + fixed_feasts_for(Y + 1) + moveable_feasts(ed, seasons)
    special = sorted(
        (sd for sd in candidates if start <= sd.date <= end and sd.name not in spec.excluded_feasts),
        key=_sort_key,
    )

    info = LiturgicalYearInfo(
        civil_year=Y,
        cycle=cycle_for(Y),
        easter_dates=ed,
        seasons=seasons,
        special_days=tuple(special),
        tradition=spec.name,
        daily_office_year=daily_office_year(Y),
        proper_sundays=sundays,
    )
    logger.debug(
        "built %s year %d: cycle %s, easter %s, %d special days",
        spec.name, Y, info.cycle, ed.easter.isoformat(), len(special),
    )
    return info


def liturgical_year_of(d: date) -> int:
    """Civil year of the Advent that opens the liturgical year containing d."""
    return d.year if d >= first_sunday_of_advent(d.year) else d.year - 1
