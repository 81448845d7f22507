"""
litcal.engines.composite
------------------------
Composite traditions, e.g. the Episcopal calendar: one tradition governs
Sundays and another governs weekdays. A composite year is a read-only view
over two LiturgicalYearInfo values; nothing is merged into a new record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from litcal.core.time import is_sunday
from litcal.core.types import CurrentInfo, DayInfo, EasterDates, LiturgicalYearInfo, ProperSunday, Season, SpecialDay
from .calendar import LiturgicalCalendar
from .specs import TraditionSpec


@dataclass(frozen=True)
class CompositeYearView:
    name: str
    primary: LiturgicalYearInfo
    secondary: LiturgicalYearInfo

    def source_for(self, d: date) -> LiturgicalYearInfo:
        return self.primary if is_sunday(d) else self.secondary

    @property
    def civil_year(self) -> int:
        return self.primary.civil_year

    @property
    def cycle(self) -> str:
        return self.primary.cycle

    @property
    def daily_office_year(self) -> int:
        return self.secondary.daily_office_year

    @property
    def easter_dates(self) -> EasterDates:
        return self.primary.easter_dates

    @property
    def seasons(self) -> Tuple[Season, ...]:
        return self.primary.seasons

    @property
    def proper_sundays(self) -> Tuple[ProperSunday, ...]:
        return self.primary.proper_sundays

    @property
    def start_date(self) -> date:
        return self.primary.start_date

    @property
    def end_date(self) -> date:
        return self.primary.end_date

    @property
    def special_days(self) -> Tuple[SpecialDay, ...]:
        seen = set()
        out: List[SpecialDay] = []
        for sd in self.primary.special_days + self.secondary.special_days:
            key = (sd.name, sd.date)
            if key not in seen:
                seen.add(key)
                out.append(sd)
        return tuple(sorted(out, key=lambda sd: (sd.date, -sd.rank, sd.name)))

    def contains(self, d: date) -> bool:
        return self.primary.contains(d)

    def season_containing(self, d: date) -> Optional[Season]:
        return self.source_for(d).season_containing(d)

    def special_days_on(self, d: date) -> Tuple[SpecialDay, ...]:
        hits = [sd for sd in self.special_days if sd.date == d]
        return tuple(sorted(hits, key=lambda sd: -sd.rank))


class CompositeCalendar:
    """Routes Sundays to the primary calendar and weekdays to the secondary."""

    def __init__(self, spec: TraditionSpec, primary: LiturgicalCalendar, secondary: LiturgicalCalendar):
        self.spec = spec
        self.primary = primary
        self.secondary = secondary

    @property
    def id(self):
        return self.spec.id

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.spec.id.__dict__,
            "title": self.spec.title,
            "abbreviation": self.spec.abbreviation,
            "description": self.spec.description,
            "components": list(self.spec.components),
        }

    def _source(self, d: date) -> LiturgicalCalendar:
        return self.primary if is_sunday(d) else self.secondary

    def build(self, civil_year: int) -> CompositeYearView:
        return CompositeYearView(self.spec.name, self.primary.build(civil_year), self.secondary.build(civil_year))

    def season_containing(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[Season]:
        return self._source(d).season_containing(d, civil_year_hint)

    def proper_number_for(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[int]:
        return self._source(d).proper_number_for(d, civil_year_hint)

    def special_days_in_range(
        self,
        start: date,
        end: date,
        civil_year_span: Optional[Tuple[int, int]] = None,
    ) -> List[SpecialDay]:
        seen = set()
        out: List[SpecialDay] = []
        for cal in (self.primary, self.secondary):
            for sd in cal.special_days_in_range(start, end, civil_year_span):
                if (sd.name, sd.date) not in seen:
                    seen.add((sd.name, sd.date))
                    out.append(sd)
        return sorted(out, key=lambda sd: (sd.date, -sd.rank, sd.name))

    def day_info(self, d: date) -> DayInfo:
        return replace(self._source(d).day_info(d), tradition=self.spec.name)

    def current_info(self, today: date, *, horizon_days: int = 30) -> CurrentInfo:
        base = self._source(today).current_info(today, horizon_days=horizon_days)
        return replace(base, tradition=self.spec.name)

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d).__dict__
