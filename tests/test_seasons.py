# tests/test_seasons.py

from dataclasses import replace
from datetime import date, timedelta

import pytest

from litcal import InvalidYearRange
from litcal.engines.anchors import first_sunday_of_advent
from litcal.engines.propers import number_seasons, proper_number_for, proper_sundays
from litcal.engines.seasons import compute_seasons, easter_dates_for, season_index

ONE = timedelta(days=1)


def test_seasons_2024():
    s = compute_seasons(2024)
    names = [x.name for x in s]
    assert names == ["Advent", "Christmas", "Ordinary Time", "Lent", "Easter", "Ordinary Time"]
    assert [x.color for x in s] == ["purple", "white", "green", "purple", "white", "green"]

    assert (s[0].start_date, s[0].end_date) == (date(2024, 12, 1), date(2024, 12, 24))
    assert (s[1].start_date, s[1].end_date) == (date(2024, 12, 25), date(2025, 1, 12))
    assert (s[2].start_date, s[2].end_date) == (date(2025, 1, 13), date(2025, 3, 4))
    assert (s[3].start_date, s[3].end_date) == (date(2025, 3, 5), date(2025, 4, 19))
    assert (s[4].start_date, s[4].end_date) == (date(2025, 4, 20), date(2025, 6, 8))
    assert (s[5].start_date, s[5].end_date) == (date(2025, 6, 9), date(2025, 11, 29))


def test_contiguous_partition():
    """Six seasons tile [Advent Y, Advent Y+1 - 1] with no gap or overlap."""
    for Y in range(1583, 2400):
        s = compute_seasons(Y)
        assert s[0].start_date == first_sunday_of_advent(Y)
        assert s[-1].end_date + ONE == first_sunday_of_advent(Y + 1)
        for a, b in zip(s, s[1:]):
            assert a.end_date + ONE == b.start_date, (Y, a.name, b.name)
        total = sum(x.days for x in s)
        assert total == (s[-1].end_date - s[0].start_date).days + 1


def test_lent_ends_holy_saturday():
    s = compute_seasons(2025)
    ed = easter_dates_for(2025)
    assert s[3].end_date == ed.easter_vigil == date(2026, 4, 4)
    assert s[4].start_date == ed.easter


def test_following_monday_convention_keeps_partition():
    s = compute_seasons(2018, convention="following_monday")
    assert s[1].end_date == date(2019, 1, 7)
    assert s[2].start_date == date(2019, 1, 8)


def test_empty_ordinary_time_before_lent():
    # Ash Wednesday the day after the Baptism of the Lord.
    ed = replace(easter_dates_for(2024), ash_wednesday=date(2025, 1, 13))
    s = compute_seasons(2024, ed)
    ot1 = s[2]
    assert (ot1.start_date, ot1.end_date) == (date(2025, 1, 13), date(2025, 1, 12))
    assert ot1.is_empty
    assert ot1.weeks == 0 and ot1.days == 0
    assert s[1].end_date + ONE == ot1.start_date
    assert ot1.end_date + ONE == s[3].start_date == date(2025, 1, 13)
    assert not ot1.contains(date(2025, 1, 13))

    sundays = proper_sundays(s, ed)
    assert all(ps.date > ed.trinity_sunday for ps in sundays)
    assert number_seasons(s, sundays)[2].proper_numbers == ()
    assert proper_number_for(date(2025, 1, 13), s, sundays) is None
    assert proper_number_for(date(2025, 1, 19), s, sundays) is None

def test_season_index():
    s = compute_seasons(2024)
    assert season_index(s, date(2024, 12, 24)) == 0
    assert season_index(s, date(2025, 3, 5)) == 3
    assert season_index(s, date(2025, 11, 29)) == 5
    assert season_index(s, date(2025, 11, 30)) is None
    assert season_index(s, date(2024, 11, 30)) is None


def test_season_helpers():
    lent = compute_seasons(2024)[3]
    assert lent.kind == "penitential"
    assert lent.weeks == 6
    assert not lent.is_empty
    assert lent.contains(date(2025, 4, 19))


def test_last_supported_year():
    with pytest.raises(InvalidYearRange):
        compute_seasons(4099)
    assert compute_seasons(4098)[0].start_date.year == 4098
