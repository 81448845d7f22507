from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from .time import days_between, weeks_in_season

CalendarDate = date
Cycle = Literal["A", "B", "C"]
SeasonKind = Literal["penitential", "festive", "ordinary"]
SpecialDayType = Literal["feast", "fast", "solemnity", "memorial", "commemoration"]

@dataclass(frozen=True)
class EasterDates:
    easter: date
    ash_wednesday: date
    palm_sunday: date
    maundy_thursday: date
    good_friday: date
    easter_vigil: date
    ascension: date
    pentecost: date
    trinity_sunday: date
    corpus_christi: date
    christ_the_king: date

@dataclass(frozen=True)
class Season:
    name: str
    color: str
    start_date: date
    end_date: date
    kind: SeasonKind
    proper_numbers: Optional[Tuple[int, ...]] = None

    @property
    def is_empty(self) -> bool:
        return self.end_date < self.start_date

    @property
    def days(self) -> int:
        return max(days_between(self.start_date, self.end_date) + 1, 0)

    @property
    def weeks(self) -> int:
        return weeks_in_season(self.start_date, self.end_date)

    def contains(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date

@dataclass(frozen=True)
class SpecialDay:
    name: str
    date: date
    type: SpecialDayType
    rank: int  # 1-10, higher = more important
    color: str
    is_moveable: bool

@dataclass(frozen=True)
class ProperSunday:
    date: date
    number: int
    label: str

@dataclass(frozen=True)
class LiturgicalYearInfo:
    """One liturgical year, Advent of civil_year through the eve of the next Advent."""
    civil_year: int
    cycle: Cycle
    easter_dates: EasterDates
    seasons: Tuple[Season, ...]
    special_days: Tuple[SpecialDay, ...]
    tradition: str = "rcl"
    daily_office_year: int = 1
    proper_sundays: Tuple[ProperSunday, ...] = ()

    @property
    def start_date(self) -> date:
        return self.seasons[0].start_date

    @property
    def end_date(self) -> date:
        return self.seasons[-1].end_date

    def contains(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date

    def season_containing(self, d: date) -> Optional[Season]:
        for s in self.seasons:
            if s.contains(d):
                return s
        return None

    def special_days_on(self, d: date) -> Tuple[SpecialDay, ...]:
        hits = [sd for sd in self.special_days if sd.date == d]
        return tuple(sorted(hits, key=lambda sd: -sd.rank))

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    tradition: str
    liturgical_year: int
    cycle: Cycle
    season: Optional[Season]
    proper_number: Optional[int] = None
    proper_label: Optional[str] = None
    special_days: Tuple[SpecialDay, ...] = ()
    attributes: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class UpcomingDay:
    special_day: SpecialDay
    days_until: int

@dataclass(frozen=True)
class CurrentInfo:
    today: date
    tradition: str
    liturgical_year: int
    cycle: Cycle
    season: Optional[Season]
    proper_number: Optional[int]
    upcoming: Tuple[UpcomingDay, ...] = ()
