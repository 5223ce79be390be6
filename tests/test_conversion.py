# tests/test_conversion.py

import random
from datetime import date, datetime, timedelta

import pytest

import ethiocal
from ethiocal import EthiopianDate
from ethiocal.engines.conversion import EPOCH_JDN, ethiopian_to_jdn, new_year_jdn
from ethiocal.core.time import to_jdn


@pytest.mark.parametrize("g, e", [
    (date(2023, 9, 12), (2016, 1, 1)),
    (date(2023, 9, 11), (2015, 13, 6)),
    (date(2023, 9, 6), (2015, 13, 1)),
    (date(2024, 1, 7), (2016, 4, 28)),
    (date(2024, 9, 10), (2016, 13, 5)),
    (date(2024, 9, 11), (2017, 1, 1)),
    (date(2024, 12, 25), (2017, 4, 16)),
    (date(2025, 9, 7), (2017, 13, 2)),
    (date(2025, 9, 11), (2018, 1, 1)),
    (date(2000, 1, 1), (1992, 4, 22)),
    (date(8, 8, 27), (1, 1, 1)),
])
def test_known_dates(g, e):
    assert ethiocal.gregorian_to_ethiopian(g) == EthiopianDate(*e)
    assert ethiocal.ethiopian_to_gregorian(*e) == g


def test_epoch_day_count():
    assert new_year_jdn(1) == EPOCH_JDN == to_jdn(date(8, 8, 27))
    assert ethiopian_to_jdn(2016, 1, 1) == to_jdn(date(2023, 9, 12))


def test_weekday_carried_by_conversion():
    e = ethiocal.gregorian_to_ethiopian(date(2023, 9, 12))
    assert e.weekday == 2  # Tuesday
    assert ethiocal.gregorian_to_ethiopian(date(2024, 12, 25)).weekday == 3  # Wednesday


def test_round_trip_every_day():
    """Every valid Ethiopian day survives Ethiopian -> Gregorian -> Ethiopian."""
    years = list(range(1, 13)) + list(range(1890, 1900)) + list(range(2010, 2030)) + [2092, 2093, 9990]
    for y in years:
        for m in range(1, 14):
            for d in range(1, ethiocal.days_in_month(m, y) + 1):
                e = EthiopianDate(y, m, d)
                g = ethiocal.ethiopian_to_gregorian(e)
                assert ethiocal.gregorian_to_ethiopian(g) == e


def test_gregorian_round_trip_random():
    random.seed(42)
    start = date(9, 1, 1)
    span = (date(9999, 12, 31) - start).days
    for _ in range(20000):
        g = start + timedelta(days=random.randint(0, span))
        e = ethiocal.gregorian_to_ethiopian(g)
        assert ethiocal.ethiopian_to_gregorian(e) == g
        assert e.weekday == g.isoweekday() % 7


def test_consecutive_days_are_consecutive():
    g = date(2015, 1, 1)
    prev = ethiocal.gregorian_to_ethiopian(g)
    for _ in range(3 * 366):
        g += timedelta(days=1)
        cur = ethiocal.gregorian_to_ethiopian(g)
        assert cur > prev
        assert ethiocal.days_between(prev, cur) == 1
        prev = cur


@pytest.mark.parametrize("gregorian_year, offset", [
    (2019, 12), (2020, 11), (2021, 11), (2022, 11), (2023, 12), (2024, 11),
])
def test_new_year_offset(gregorian_year, offset):
    assert ethiocal.new_year_offset(gregorian_year) == offset
    assert ethiocal.new_year_date(gregorian_year - 7) == date(gregorian_year, 9, offset)


def test_new_year_offset_matches_gregorian_leap_rule_1900_2099():
    for gy in range(1901, 2099):
        expected = 12 if ethiocal.is_gregorian_leap(gy + 1) else 11
        assert ethiocal.new_year_offset(gy) == expected


def test_accepts_datetime_and_tuple():
    expected = EthiopianDate(2016, 1, 1)
    assert ethiocal.gregorian_to_ethiopian(datetime(2023, 9, 12, 23, 59)) == expected
    assert ethiocal.gregorian_to_ethiopian((2023, 9, 12)) == expected
    assert EthiopianDate.from_gregorian([2023, 9, 12]) == expected


@pytest.mark.parametrize("bad", [
    "2023-09-12",
    None,
    (2023, 2, 30),
    (2023, 13, 1),
    (2023, 9),
    ("2023", 9, 12),
])
def test_invalid_gregorian_input(bad):
    with pytest.raises(ethiocal.InvalidInput):
        ethiocal.gregorian_to_ethiopian(bad)


def test_before_ethiopian_year_one():
    with pytest.raises(ethiocal.InvalidInput):
        ethiocal.gregorian_to_ethiopian(date(8, 8, 26))
    with pytest.raises(ethiocal.InvalidInput):
        ethiocal.gregorian_to_ethiopian(date(1, 1, 1))


def test_ethiopian_to_gregorian_rejects_invalid():
    with pytest.raises(ethiocal.InvalidDay) as exc:
        ethiocal.ethiopian_to_gregorian(2016, 13, 6)
    assert exc.value.max_allowed == 5
    with pytest.raises(ethiocal.OutOfRange):
        ethiocal.ethiopian_to_gregorian(2016, 14, 1)
    with pytest.raises(ethiocal.InvalidYear):
        ethiocal.ethiopian_to_gregorian(0, 1, 1)


def test_ethiopian_to_gregorian_beyond_date_max():
    with pytest.raises(ethiocal.InvalidYear):
        ethiocal.ethiopian_to_gregorian(9999, 1, 1)


def test_ethiopian_date_method():
    assert EthiopianDate(2017, 4, 16).to_gregorian() == date(2024, 12, 25)
    with pytest.raises(TypeError):
        ethiocal.ethiopian_to_gregorian(EthiopianDate(2017, 4, 16), 1, 1)


def test_add_days():
    e = EthiopianDate(2015, 13, 6)
    assert ethiocal.add_days(e, 1) == EthiopianDate(2016, 1, 1)
    assert ethiocal.add_days(EthiopianDate(2016, 1, 1), -1) == e
    assert ethiocal.add_days(e, 0) == e
    assert ethiocal.days_between(EthiopianDate(2016, 1, 1), EthiopianDate(2017, 1, 1)) == 365
    assert ethiocal.days_between(EthiopianDate(2015, 1, 1), EthiopianDate(2016, 1, 1)) == 366
    with pytest.raises(ethiocal.InvalidYear):
        ethiocal.add_days(EthiopianDate(1, 1, 1), -1)


def test_today_uses_clock():
    assert ethiocal.today(lambda: date(2023, 9, 12)) == EthiopianDate(2016, 1, 1)
    t = ethiocal.today()
    assert isinstance(t, EthiopianDate)
    assert ethiocal.is_valid(t.year, t.month, t.day)
