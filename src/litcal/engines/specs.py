"""
litcal.engines.specs
--------------------
Pure-data descriptions of the supported traditions. A spec carries every
tradition-dependent choice; the engines hold no other configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Literal, Tuple

from .anchors import EpiphanySundayConvention
from .propers import ProperLabels, RCL_LABELS


@dataclass(frozen=True)
class TraditionId:
    family: Literal["sunday", "daily", "composite"]
    name: str
    version: str


@dataclass(frozen=True)
class TraditionSpec:
    id: TraditionId
    title: str
    abbreviation: str
    description: str
    convention: EpiphanySundayConvention = EpiphanySundayConvention.NEXT_SUNDAY
    labels: ProperLabels = RCL_LABELS
    excluded_feasts: Tuple[str, ...] = ()
    # Composite traditions only: (sunday tradition, weekday tradition).
    components: Tuple[str, ...] = field(default=())

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def is_composite(self) -> bool:
        return self.id.family == "composite"

    @staticmethod
    def like(name: str) -> "TraditionSpec":
        if name not in ALL_SPECS:
            from litcal.core.errors import UnknownTradition
            raise UnknownTradition(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "TraditionSpec":
        if "convention" in kwargs:
            kwargs["convention"] = EpiphanySundayConvention.parse(kwargs["convention"])
        return replace(self, **kwargs)


# ============================================================
# SUNDAY LECTIONARIES
# ============================================================

RCL = TraditionSpec(
    id=TraditionId("sunday", "rcl", "1992"),
    title="Revised Common Lectionary",
    abbreviation="RCL",
    description="Three-year Sunday lectionary used by most Protestant denominations",
    labels=RCL_LABELS,
    excluded_feasts=("Corpus Christi",),
)

RC = TraditionSpec(
    id=TraditionId("sunday", "rc", "1981"),
    title="Roman Catholic Lectionary",
    abbreviation="RC",
    description="Three-year Sunday lectionary based on the Order of Readings for Mass",
    labels=ProperLabels(
        before_lent="{ord} Sunday in Ordinary Time",
        after_pentecost="{ord} Sunday in Ordinary Time",
        terminal="Christ the King",
        offset=5,
    ),
)

# ============================================================
# DAILY OFFICE
# ============================================================

BCP = TraditionSpec(
    id=TraditionId("daily", "bcp", "1979"),
    title="BCP Daily Office Lectionary",
    abbreviation="BCP",
    description="Two-year weekday lectionary from the Book of Common Prayer",
    labels=RCL_LABELS,
    excluded_feasts=("Corpus Christi",),
)

# ============================================================
# COMPOSITES
# ============================================================

EPISCOPAL = TraditionSpec(
    id=TraditionId("composite", "episcopal", "1979"),
    title="Episcopal Church Lectionary",
    abbreviation="Episcopal",
    description="Composite tradition: RCL for Sundays, BCP Daily Office for weekdays",
    components=("rcl", "bcp"),
)

ALL_SPECS: Dict[str, TraditionSpec] = {
    s.name: s for s in (RCL, RC, BCP, EPISCOPAL)
}
