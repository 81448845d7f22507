"""
litcal.engines.factory
----------------------
Turns pure-data TraditionSpec values into live calendar objects.
"""

from __future__ import annotations
from typing import Union

from .calendar import LiturgicalCalendar
from .composite import CompositeCalendar
from .specs import TraditionSpec


def make_engine(spec: TraditionSpec) -> Union[LiturgicalCalendar, CompositeCalendar]:
    """The universal entry point."""
    if not spec.is_composite:
        return LiturgicalCalendar(spec)

    if len(spec.components) != 2:
        raise ValueError(f"Composite tradition '{spec.name}' needs exactly two components")
    primary, secondary = (TraditionSpec.like(name) for name in spec.components)
    return CompositeCalendar(spec, LiturgicalCalendar(primary), LiturgicalCalendar(secondary))
