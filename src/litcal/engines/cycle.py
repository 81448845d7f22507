from __future__ import annotations

from typing import Dict

from litcal.core.types import Cycle
from .anchors import first_sunday_of_advent

# Calibrated against Advent 2024 (Year C), 2025 (Year A) and 2026 (Year B).
CYCLE_TABLE: Dict[int, Cycle] = {0: "A", 1: "B", 2: "C"}


def cycle_for(civil_year: int) -> Cycle:
    """Sunday lectionary year for the liturgical year whose Advent falls in civil_year."""
    y = first_sunday_of_advent(civil_year).year
    return CYCLE_TABLE[y % 3]


def daily_office_year(civil_year: int) -> int:
    """
    BCP Daily Office year (1 or 2). Year One begins on the First Sunday of
    Advent preceding an odd-numbered year.
    """
    y = first_sunday_of_advent(civil_year).year
    return 1 if (y + 1) % 2 == 1 else 2
