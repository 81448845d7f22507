from __future__ import annotations
from typing import Any, Dict

from ..core.time import days_between, weekday as _weekday
from ..core.types import DayInfo
from ..engines.seasons import easter_dates_for
from .registry import attribute

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

@attribute("weekday")
def weekday(info: DayInfo) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, matching the Advent and Proper rules.
    w = _weekday(info.civil_date)
    return {"weekday": w, "weekday_name": WEEKDAY_NAMES[w]}

@attribute("season_week")
def season_week(info: DayInfo) -> Dict[str, Any]:
    """1-based week within the current season; weeks begin on the season's first day."""
    s = info.season
    if s is None:
        return {"season_week": None}
    return {"season_week": days_between(s.start_date, info.civil_date) // 7 + 1}

@attribute("days_to_easter")
def days_to_easter(info: DayInfo) -> Dict[str, Any]:
    easter = easter_dates_for(info.liturgical_year).easter
    return {"days_to_easter": days_between(info.civil_date, easter)}

@attribute("color")
def color(info: DayInfo) -> Dict[str, Any]:
    # Highest-ranked special day wins over the season color.
    if info.special_days:
        return {"color": info.special_days[0].color}
    return {"color": info.season.color if info.season is not None else None}
