# tests/test_builder.py

from datetime import date

import pytest

import litcal
from litcal import InvalidYearRange
from litcal.engines.builder import build, holy_family, liturgical_year_of
from litcal.engines.specs import TraditionSpec


def test_build_2024_end_to_end():
    info = build(2024)
    assert info.civil_year == 2024
    assert info.tradition == "rcl"
    assert info.cycle == "C"
    assert info.daily_office_year == 1
    assert info.easter_dates.easter == date(2025, 4, 20)
    assert info.start_date == date(2024, 12, 1)
    assert info.end_date == date(2025, 11, 29)
    assert len(info.seasons) == 6


def test_special_days_2024():
    info = build(2024)
    names = [sd.name for sd in info.special_days]
    assert len(names) == 25
    assert names[0] == "Immaculate Conception"
    assert "Corpus Christi" not in names
    assert info.special_days[-1].name == "Christ the King"
    assert info.special_days[-1].date == date(2025, 11, 23)

    dates = [sd.date for sd in info.special_days]
    assert dates == sorted(dates)
    assert all(info.start_date <= d <= info.end_date for d in dates)

    easter = info.special_days_on(date(2025, 4, 20))
    assert [sd.name for sd in easter] == ["Easter Sunday"]
    assert easter[0].is_moveable
    assert easter[0].rank == 10


def test_special_days_include_derived_feasts():
    info = build(2024)
    by_name = {sd.name: sd for sd in info.special_days}
    assert by_name["Holy Family"].date == date(2024, 12, 29)
    assert by_name["Baptism of the Lord"].date == date(2025, 1, 12)
    assert by_name["Christmas Day"].date == date(2024, 12, 25)
    assert not by_name["Christmas Day"].is_moveable
    assert by_name["All Souls"].type == "commemoration"


def test_roman_tradition_keeps_corpus_christi():
    info = build(2024, TraditionSpec.like("rc"))
    names = [sd.name for sd in info.special_days]
    assert len(names) == 26
    assert "Corpus Christi" in names
    assert info.tradition == "rc"


def test_build_is_idempotent():
    assert build(2025) == build(2025)
    assert litcal.build_year(2025) == litcal.build_year(2025)


def test_build_rejects_composite():
    with pytest.raises(TypeError):
        build(2024, TraditionSpec.like("episcopal"))


@pytest.mark.parametrize("year", [1582, 4099])
def test_build_range(year):
    with pytest.raises(InvalidYearRange):
        build(year)


def test_holy_family():
    assert holy_family(2024) == date(2024, 12, 29)
    # Christmas on a Sunday
    assert holy_family(2022) == date(2022, 12, 30)


@pytest.mark.parametrize(
    "d, Y",
    [
        (date(2024, 11, 30), 2023),
        (date(2024, 12, 1), 2024),
        (date(2025, 6, 1), 2024),
        (date(2025, 11, 30), 2025),
    ],
)
def test_liturgical_year_of(d, Y):
    assert liturgical_year_of(d) == Y
    assert build(Y).contains(d)
