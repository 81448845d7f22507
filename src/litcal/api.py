from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import default_tradition
from .core.engine import LiturgicalEngine, TraditionRegistry
from .core.types import CurrentInfo, DayInfo, LiturgicalYearInfo, Season, SpecialDay
from .attributes.registry import compute_attributes
from .engines.builder import liturgical_year_of as _liturgical_year_of
from .engines.easter import compute_easter
from .engines.factory import make_engine as _make_engine
from .engines.patterns import resolve_pattern
from .engines.specs import TraditionSpec

_registry: Optional[TraditionRegistry] = None

def set_registry(reg: TraditionRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> TraditionRegistry:
    if _registry is None:
        raise RuntimeError("Tradition registry not initialized")
    return _registry

def _get(tradition: Optional[str]) -> LiturgicalEngine:
    return _reg().get(tradition if tradition is not None else default_tradition())

def list_traditions() -> List[str]:
    return _reg().list()

def tradition_info(tradition: str) -> Dict[str, Any]:
    return _reg().get(tradition).info()

def make_engine(spec: TraditionSpec) -> LiturgicalEngine:
    return _make_engine(spec)

def register_tradition(name: str, engine: LiturgicalEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Year-level API
# ============================================================

def easter(civil_year: int) -> date:
    return compute_easter(civil_year)

def build_year(civil_year: int, *, tradition: Optional[str] = None) -> LiturgicalYearInfo:
    """Liturgical year that begins at Advent of civil_year."""
    return _get(tradition).build(civil_year)

def liturgical_year_of(d: date) -> int:
    return _liturgical_year_of(d)

def sunday_for_pattern(pattern: str, civil_year: int, *, tradition: Optional[str] = None) -> date:
    eng = _get(tradition)
    spec = getattr(eng, "spec", None)
    if spec is not None and spec.is_composite:
        spec = TraditionSpec.like(spec.components[0])
    convention = spec.convention if spec is not None else "next_sunday"
    return resolve_pattern(pattern, civil_year, convention)

# ============================================================
# Date-level API
# ============================================================

def season_containing(
    d: date,
    civil_year_hint: Optional[int] = None,
    *,
    tradition: Optional[str] = None,
) -> Optional[Season]:
    return _get(tradition).season_containing(d, civil_year_hint)

def proper_number_for(
    d: date,
    civil_year_hint: Optional[int] = None,
    *,
    tradition: Optional[str] = None,
) -> Optional[int]:
    return _get(tradition).proper_number_for(d, civil_year_hint)

def special_days_in_range(
    start: date,
    end: date,
    civil_year_span: Optional[Tuple[int, int]] = None,
    *,
    tradition: Optional[str] = None,
) -> List[SpecialDay]:
    return _get(tradition).special_days_in_range(start, end, civil_year_span)

def day_info(
    d: date,
    *,
    tradition: Optional[str] = None,
    attributes: Sequence[str] = (),
) -> DayInfo:
    info = _get(tradition).day_info(d)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date, *, tradition: Optional[str] = None) -> Dict[str, Any]:
    return _get(tradition).explain(d)

def current_info(
    today: Optional[date] = None,
    *,
    tradition: Optional[str] = None,
    horizon_days: int = 30,
) -> CurrentInfo:
    if today is None:
        today = date.today()
    return _get(tradition).current_info(today, horizon_days=horizon_days)
