from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Tuple

from litcal.config import check_year
from litcal.core.types import SpecialDay, SpecialDayType

@dataclass(frozen=True)
class FixedFeast:
    name: str
    month: int
    day: int
    type: SpecialDayType
    rank: int
    color: str

    def on(self, civil_year: int) -> SpecialDay:
        return SpecialDay(
            name=self.name,
            date=date(civil_year, self.month, self.day),
            type=self.type,
            rank=self.rank,
            color=self.color,
            is_moveable=False,
        )

FIXED_FEASTS: Tuple[FixedFeast, ...] = (
    FixedFeast("Mary, Mother of God", 1, 1, "solemnity", 9, "white"),
    FixedFeast("Epiphany of the Lord", 1, 6, "solemnity", 9, "white"),
    FixedFeast("Presentation of the Lord", 2, 2, "feast", 7, "white"),
    FixedFeast("Saint Joseph", 3, 19, "solemnity", 8, "white"),
    FixedFeast("Annunciation of the Lord", 3, 25, "solemnity", 9, "white"),
    FixedFeast("Saints Peter and Paul", 6, 29, "solemnity", 8, "red"),
    FixedFeast("Transfiguration of the Lord", 8, 6, "feast", 7, "white"),
    FixedFeast("Assumption of Mary", 8, 15, "solemnity", 9, "white"),
    FixedFeast("Exaltation of the Holy Cross", 9, 14, "feast", 7, "red"),
    FixedFeast("All Saints", 11, 1, "solemnity", 9, "white"),
    FixedFeast("All Souls", 11, 2, "commemoration", 5, "purple"),
    FixedFeast("Immaculate Conception", 12, 8, "solemnity", 9, "white"),
    FixedFeast("Christmas Day", 12, 25, "solemnity", 10, "white"),
)

def fixed_feasts_for(civil_year: int) -> List[SpecialDay]:
    Y = check_year(civil_year)
    return [f.on(Y) for f in FIXED_FEASTS]
