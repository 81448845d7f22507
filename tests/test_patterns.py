# tests/test_patterns.py

from datetime import date

import pytest

import litcal
from litcal import UnknownDatePattern
from litcal.engines.patterns import known_patterns, resolve_pattern


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("advent_1", date(2024, 12, 1)),
        ("advent_4", date(2024, 12, 22)),
        ("december_24", date(2024, 12, 24)),
        ("december_25", date(2024, 12, 25)),
        ("christmas_1", date(2024, 12, 29)),
        ("january_6", date(2025, 1, 6)),
        ("baptism_lord", date(2025, 1, 12)),
        ("epiphany_2", date(2025, 1, 19)),
        ("transfiguration", date(2025, 3, 2)),
        ("ash_wednesday", date(2025, 3, 5)),
        ("lent_1", date(2025, 3, 9)),
        ("lent_5", date(2025, 4, 6)),
        ("palm_sunday", date(2025, 4, 13)),
        ("good_friday", date(2025, 4, 18)),
        ("easter_day", date(2025, 4, 20)),
        ("easter_2", date(2025, 4, 27)),
        ("easter_7", date(2025, 6, 1)),
        ("pentecost", date(2025, 6, 8)),
        ("trinity_sunday", date(2025, 6, 15)),
        ("proper_17", date(2025, 8, 31)),
        ("christ_king", date(2025, 11, 23)),
    ],
)
def test_resolve_2024(pattern, expected):
    assert resolve_pattern(pattern, 2024) == expected


def test_case_and_whitespace():
    assert resolve_pattern("  Advent_2 ", 2024) == date(2024, 12, 8)


@pytest.mark.parametrize("pattern", ["advent_0", "advent_5", "lent_6", "proper_3", "proper_29", "easter_1", "sunday_1", ""])
def test_unknown_patterns(pattern):
    with pytest.raises(UnknownDatePattern):
        resolve_pattern(pattern, 2024)


def test_known_patterns_all_resolve():
    keys = known_patterns()
    assert "advent_1" in keys and "proper_28" in keys
    trinity = resolve_pattern("trinity_sunday", 2025)
    for key in keys:
        family = key.split("_")[0]
        try:
            d = resolve_pattern(key, 2025)
        except UnknownDatePattern:
            # only Ordinary Time Sundays may go unused in a given year
            assert family in ("epiphany", "proper"), key
            continue
        assert isinstance(d, date)
        if family == "proper":
            assert d > trinity


@pytest.mark.parametrize("pattern", ["proper_4", "proper_5", "proper_6", "epiphany_9"])
def test_unused_ordinary_sundays_2024(pattern):
    # proper_4..6 anchors fall on Easter 7, Pentecost and Trinity Sunday 2025;
    # epiphany_9 would be Lent 1.
    with pytest.raises(UnknownDatePattern):
        resolve_pattern(pattern, 2024)


@pytest.mark.parametrize(
    "pattern, year, expected",
    [
        ("proper_7", 2024, date(2025, 6, 22)),
        ("proper_28", 2024, date(2025, 11, 16)),
        ("epiphany_8", 2024, date(2025, 3, 2)),
        ("proper_5", 2025, date(2026, 6, 7)),
        ("epiphany_6", 2025, date(2026, 2, 15)),
    ],
)
def test_ordinary_sundays_follow_year_numbering(pattern, year, expected):
    assert resolve_pattern(pattern, year) == expected


@pytest.mark.parametrize("pattern", ["epiphany_7", "epiphany_8", "epiphany_9", "proper_4"])
def test_unused_ordinary_sundays_2025(pattern):
    with pytest.raises(UnknownDatePattern):
        resolve_pattern(pattern, 2025)


def test_epiphany_numbering_with_monday_baptism():
    # Baptism moves to Monday Jan 7 2019; the next Sunday is still Epiphany 2.
    assert resolve_pattern("epiphany_2", 2018, "following_monday") == date(2019, 1, 13)


def test_api_uses_tradition_convention():
    # Jan 6 2019 is a Sunday
    assert litcal.sunday_for_pattern("baptism_lord", 2018) == date(2019, 1, 13)
    assert litcal.sunday_for_pattern("baptism_lord", 2018, tradition="episcopal") == date(2019, 1, 13)
