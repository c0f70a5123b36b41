from datetime import date

import pytest

from devi_trainer.core import (
    Weekday,
    doomsday,
    leap_year,
    st_mag_53,
    svm_86,
    tomohiko_sakamoto,
    zeller,
)
from devi_trainer.shakuntala import shakuntala_devi
from devi_trainer.weekday import ALGORITHMS, Algorithm, weekday_for
from tests.calendar_helpers import has_feb_29, iter_days


def _mismatches(algorithm, first: date, last: date) -> list[date]:
    return [dt for dt in iter_days(first, last) if algorithm(dt) != Weekday.of(dt)]


def test_sakamoto_matches_calendar():
    assert _mismatches(tomohiko_sakamoto, date(1583, 1, 1), date(9999, 12, 31)) == []


def test_zeller_matches_calendar():
    assert _mismatches(zeller, date(1584, 1, 1), date(9999, 12, 31)) == []


def test_shakuntala_devi_matches_calendar():
    bad = [
        dt
        for dt in iter_days(date(1584, 1, 1), date(2204, 12, 31))
        if shakuntala_devi(dt)[0] != Weekday.of(dt)
    ]
    assert bad == []


def test_doomsday_matches_calendar():
    assert _mismatches(doomsday, date(1800, 1, 1), date(2199, 12, 31)) == []


def test_st_mag_53_matches_calendar():
    assert _mismatches(st_mag_53, date(1700, 1, 1), date(2000, 1, 1)) == []


def test_svm_86_matches_calendar():
    assert _mismatches(svm_86, date(1583, 1, 3), date(9999, 12, 31)) == []


def test_leap_year_matches_calendar():
    assert [y for y in range(1853, 10000) if leap_year(y) != has_feb_29(y)] == []


@pytest.mark.parametrize(
    "dt",
    [date(1800, 1, 1), date(1900, 2, 28), date(2000, 2, 29), date(2100, 3, 1), date(2199, 12, 31)],
)
def test_weekday_for_dispatches_every_algorithm(dt):
    assert set(ALGORITHMS) == set(Algorithm)
    for algorithm in Algorithm:
        if algorithm is Algorithm.ST_MAG_53 and dt.year >= 2000:
            continue
        assert weekday_for(dt, algorithm) == Weekday.of(dt), algorithm
