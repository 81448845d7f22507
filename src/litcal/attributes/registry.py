"""Named, optional per-day attributes requested through `day_info(..., attributes=...)`."""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> AttrFunc:
    _ATTRIBUTES[name] = fn
    return fn

def attribute(name: str) -> Callable[[AttrFunc], AttrFunc]:
    """Decorator form of register_attribute."""
    def deco(fn: AttrFunc) -> AttrFunc:
        return register_attribute(name, fn)
    return deco

def list_attributes() -> List[str]:
    return sorted(_ATTRIBUTES)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    """Merge the dicts produced by each named attribute, in request order."""
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {list_attributes()}")
    values: Dict[str, Any] = {}
    for name in names:
        values.update(_ATTRIBUTES[name](info))
    return values
