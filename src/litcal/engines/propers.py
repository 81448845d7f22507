"""
litcal.engines.propers
----------------------
Numbering of Ordinary Time Sundays.

After Pentecost each Proper N (4..28) is pinned to a calendar anchor,
June 1 + 7 * (N - 4) days, and is read on the Sunday closest to it. Christ
the King closes the sequence as Proper 29. Only Sundays after Trinity Sunday
and inside Ordinary Time II are numbered, so the first Proper used shifts
with the date of Easter.

Before Lent the Sundays are counted from the Baptism of the Lord, which is
Sunday 1; the first Sunday inside Ordinary Time I is therefore number 2.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Sequence, Tuple

from litcal.config import check_year
from litcal.core.time import add_days, closest_sunday, days_between, sunday_after, sunday_on_or_before
from litcal.core.types import EasterDates, ProperSunday, Season
from .anchors import christ_the_king
from .seasons import CHRISTMAS_IX, ORDINARY_I_IX, ORDINARY_II_IX

FIRST_PROPER = 4
LAST_PROPER = 28
CHRIST_THE_KING_PROPER = 29
FIRST_PROPER_ANCHOR = (6, 1)  # month, day of Proper 4


@dataclass(frozen=True)
class ProperLabels:
    """
    Label templates. `{n}` is the number, `{ord}` its English ordinal.
    `offset` is added to Ordinary Time II numbers (5 turns Proper 4 into
    the 9th Sunday in Ordinary Time).

    With offset 0 the anchored range is Proper 4..28, so after a very early
    Easter the Sunday between Trinity Sunday and Proper 4 stays unnumbered
    (e.g. 2008-05-25). A nonzero offset marks a continuous week count, and
    those Sundays are numbered backwards from the first anchored Proper.
    """
    before_lent: str = "Epiphany {n}"
    after_pentecost: str = "Proper {n}"
    terminal: str = "Christ the King"
    offset: int = 0

    def render(self, template: str, n: int) -> str:
        return template.format(n=n, ord=ordinal(n))


RCL_LABELS = ProperLabels()


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def proper_anchor(n: int, civil_year: int) -> date:
    if not (FIRST_PROPER <= n <= LAST_PROPER):
        raise ValueError(f"Proper {n} has no calendar anchor (valid: {FIRST_PROPER}..{LAST_PROPER})")
    m, d = FIRST_PROPER_ANCHOR
    return add_days(date(check_year(civil_year), m, d), 7 * (n - FIRST_PROPER))


def proper_date(n: int, civil_year: int) -> date:
    """Candidate Sunday of Proper n in civil_year, before any season filtering."""
    if n == CHRIST_THE_KING_PROPER:
        return christ_the_king(civil_year)
    return closest_sunday(proper_anchor(n, civil_year))


def _before_lent(seasons: Sequence[Season], labels: ProperLabels) -> List[ProperSunday]:
    ot1 = seasons[ORDINARY_I_IX]
    base = sunday_on_or_before(seasons[CHRISTMAS_IX].end_date)
    out: List[ProperSunday] = []
    d = sunday_after(seasons[CHRISTMAS_IX].end_date)
    while d <= ot1.end_date:
        n = days_between(base, d) // 7 + 1
        out.append(ProperSunday(d, n, labels.render(labels.before_lent, n)))
        d = add_days(d, 7)
    return out


def _after_pentecost(seasons: Sequence[Season], ed: EasterDates, labels: ProperLabels) -> List[ProperSunday]:
    ot2 = seasons[ORDINARY_II_IX]
    year = ed.pentecost.year
    out: List[ProperSunday] = []
    for n in range(FIRST_PROPER, LAST_PROPER + 1):
        d = proper_date(n, year)
        if ed.trinity_sunday < d < ed.christ_the_king and ot2.contains(d):
            k = n + labels.offset
            out.append(ProperSunday(d, k, labels.render(labels.after_pentecost, k)))
    if labels.offset and out:
        d, k = add_days(out[0].date, -7), out[0].number - 1
        while d > ed.trinity_sunday and ot2.contains(d):
            out.insert(0, ProperSunday(d, k, labels.render(labels.after_pentecost, k)))
            d, k = add_days(d, -7), k - 1
    if ot2.contains(ed.christ_the_king):
        k = CHRIST_THE_KING_PROPER + labels.offset
        out.append(ProperSunday(ed.christ_the_king, k, labels.render(labels.terminal, k)))
    return out


def proper_sundays(
    seasons: Sequence[Season],
    easter_dates: EasterDates,
    labels: ProperLabels = RCL_LABELS,
) -> Tuple[ProperSunday, ...]:
    """All numbered Sundays of one liturgical year, in date order."""
    return tuple(_before_lent(seasons, labels) + _after_pentecost(seasons, easter_dates, labels))


def number_seasons(seasons: Sequence[Season], sundays: Sequence[ProperSunday]) -> Tuple[Season, ...]:
    """Return seasons with proper_numbers filled for both Ordinary Time seasons."""
    out = list(seasons)
    for ix in (ORDINARY_I_IX, ORDINARY_II_IX):
        s = out[ix]
        nums = tuple(ps.number for ps in sundays if s.contains(ps.date))
        out[ix] = replace(s, proper_numbers=nums)
    return tuple(out)


def proper_number_for(
    d: date,
    seasons: Sequence[Season],
    sundays: Sequence[ProperSunday],
) -> Optional[int]:
    """
    Number of the Ordinary Time week containing d, governed by the Sunday on
    or before d. None outside Ordinary Time and in unnumbered weeks (the
    weeks of Pentecost and Trinity Sunday).
    """
    sunday = sunday_on_or_before(d)
    if seasons[ORDINARY_I_IX].contains(d):
        base = sunday_on_or_before(seasons[CHRISTMAS_IX].end_date)
        return days_between(base, sunday) // 7 + 1
    if seasons[ORDINARY_II_IX].contains(d):
        for ps in sundays:
            if ps.date == sunday:
                return ps.number
    return None
