from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .errors import UnknownTradition
from .types import CurrentInfo, DayInfo, LiturgicalYearInfo, Season, SpecialDay

logger = logging.getLogger(__name__)

class LiturgicalEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def build(self, civil_year: int) -> LiturgicalYearInfo: ...
    def season_containing(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[Season]: ...
    def proper_number_for(self, d: date, civil_year_hint: Optional[int] = None) -> Optional[int]: ...
    def special_days_in_range(
        self, start: date, end: date, civil_year_span: Optional[Tuple[int, int]] = None
    ) -> List[SpecialDay]: ...
    def day_info(self, d: date) -> DayInfo: ...
    def current_info(self, today: date, *, horizon_days: int = 30) -> CurrentInfo: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class TraditionRegistry:
    _engines: Dict[str, LiturgicalEngine]

    def get(self, name: str) -> LiturgicalEngine:
        if name not in self._engines:
            raise UnknownTradition(f"Unknown tradition '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: LiturgicalEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Tradition '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering tradition %r (overwrite=%s)", name, overwrite)
        self._engines[name] = engine
