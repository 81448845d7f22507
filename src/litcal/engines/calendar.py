"""
litcal.engines.calendar
-----------------------
The Orchestrator. Binds one TraditionSpec to the year builder and answers
date-level questions (season, Proper, special days) by locating the
liturgical year that contains the date.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from litcal.core.time import add_days, days_between, sunday_on_or_before
from litcal.core.types import CurrentInfo, DayInfo, LiturgicalYearInfo, Season, SpecialDay, UpcomingDay
from .builder import build, liturgical_year_of
from .propers import proper_number_for as _proper_number_for
from .specs import TraditionSpec


class LiturgicalCalendar:
    """
    Stateless per-tradition facade. Every call rebuilds the year it needs;
    callers wanting reuse wrap build() in a litcal.cache.YearCache.
    """
    def __init__(self, spec: TraditionSpec):
        if spec.is_composite:
            raise ValueError(f"Tradition '{spec.name}' is composite; use CompositeCalendar")
        self.spec = spec

    @property
    def id(self):
        return self.spec.id

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.spec.id.__dict__,
            "title": self.spec.title,
            "abbreviation": self.spec.abbreviation,
            "description": self.spec.description,
            "convention": self.spec.convention.value,
        }

    def build(self, civil_year: int) -> LiturgicalYearInfo:
        return build(civil_year, self.spec)

    # ---------------------------------------------------------
    # Date lookups
    # ---------------------------------------------------------

    def year_containing(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[LiturgicalYearInfo]:
        """
        The liturgical year holding d. With a hint, only that year is
        consulted and None is returned when d lies outside it.
        """
        Y = liturgical_year_of(d) if civil_year_hint is None else civil_year_hint
        info = self.build(Y)
        return info if info.contains(d) else None

    def season_containing(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[Season]:
        info = self.year_containing(d, civil_year_hint)
        return info.season_containing(d) if info is not None else None

    def proper_number_for(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[int]:
        info = self.year_containing(d, civil_year_hint)
        if info is None:
            return None
        return _proper_number_for(d, info.seasons, info.proper_sundays)

    def special_days_in_range(
        self,
        start: date,
        end: date,
        civil_year_span: Optional[Tuple[int, int]] = None,
    ) -> List[SpecialDay]:
        """Special days with start <= date <= end, ordered by date then rank."""
        if end < start:
            return []
        if civil_year_span is None:
            civil_year_span = (liturgical_year_of(start), liturgical_year_of(end))
        y0, y1 = civil_year_span
        out: List[SpecialDay] = []
        for Y in range(y0, y1 + 1):
            out.extend(sd for sd in self.build(Y).special_days if start <= sd.date <= end)
        return out

    def day_info(self, d: date) -> DayInfo:
        info = self.build(liturgical_year_of(d))
        number = _proper_number_for(d, info.seasons, info.proper_sundays)
        label = None
        if number is not None:
            sunday = sunday_on_or_before(d)
            label = next((ps.label for ps in info.proper_sundays if ps.date == sunday), None)
        return DayInfo(
            civil_date=d,
            tradition=self.spec.name,
            liturgical_year=info.civil_year,
            cycle=info.cycle,
            season=info.season_containing(d),
            proper_number=number,
            proper_label=label,
            special_days=info.special_days_on(d),
        )

    def current_info(self, today: date, *, horizon_days: int = 30) -> CurrentInfo:
        """Season, Proper and the special days falling within horizon_days of today."""
        day = self.day_info(today)
        upcoming = tuple(
            UpcomingDay(sd, days_between(today, sd.date))
            for sd in self.special_days_in_range(today, add_days(today, horizon_days))
        )
        return CurrentInfo(
            today=today,
            tradition=self.spec.name,
            liturgical_year=day.liturgical_year,
            cycle=day.cycle,
            season=day.season,
            proper_number=day.proper_number,
            upcoming=upcoming,
        )

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d).__dict__
