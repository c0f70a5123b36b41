from datetime import date

import pytest

from . import core, tables
from .core import UnsupportedCenturyError, Weekday, YearOutOfRangeError
from .shakuntala import nearest_reference_year, shakuntala_devi
from .weekday import Algorithm, weekday_for


def test_leap_year_basics():
    assert core.leap_year(1584)
    assert core.leap_year(2000)
    assert not core.leap_year(1900)
    assert not core.leap_year(2023)


def test_weekday_conversions():
    assert Weekday.from_sunday_zero_index(0) == Weekday.SUNDAY
    assert Weekday.from_sunday_zero_index(1) == Weekday.MONDAY
    assert Weekday.from_sunday_zero_index(-1) == Weekday.SATURDAY
    assert Weekday.from_zeller_index(0) == Weekday.SATURDAY
    assert Weekday.from_zeller_index(2) == Weekday.MONDAY
    assert Weekday.from_monday_zero_index(13) == Weekday.SUNDAY
    assert Weekday.MONDAY.pred() == Weekday.SUNDAY
    assert Weekday.of(date(2000, 1, 1)) == Weekday.SATURDAY


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_all_algorithms_agree_on_1928_01_07(algorithm):
    assert weekday_for(date(1928, 1, 7), algorithm) == Weekday.SATURDAY


def test_weekday_for_accepts_names():
    assert weekday_for(date(1980, 1, 7), "st_mag_53") == Weekday.MONDAY
    assert weekday_for(date(1980, 1, 7)) == Weekday.MONDAY
    with pytest.raises(ValueError):
        weekday_for(date(1980, 1, 7), "julian")


def test_year_table_values():
    table = tables.year_table()
    assert table[1584] == 0
    assert table[1588] == 5
    assert table[1600] == 6
    assert table[1604] == 4
    assert table[1928] == 0
    assert table[1980] == 2
    assert table[2024] == 1
    # band starts get an entry even when they are not leap years
    assert 1900 in table
    assert 2200 not in table
    assert 1580 not in table


def test_year_table_is_read_only():
    with pytest.raises(TypeError):
        tables.year_table()[1584] = 3


def test_month_table_value():
    assert tables.month_table_value(1) == 0
    assert tables.month_table_value(12) == 5
    with pytest.raises(ValueError):
        tables.month_table_value(13)


def test_shakuntala_devi_direct_leap_entry_before_march():
    weekday, tips = shakuntala_devi(date(1928, 1, 7))
    assert weekday == Weekday.SATURDAY
    assert tips == [
        "Step 1: day 7 mod 7 plus month entry 0 gives 0",
        "Step 2: year table entry for 1928 is 0",
        "Step 3: January or February of a leap year, subtract 1",
        "Step 4: -1 mod 7 is 6, counting from Sunday = 0",
    ]


def test_shakuntala_devi_february_of_leap_year():
    weekday, tips = shakuntala_devi(date(1980, 2, 1))
    assert weekday == Weekday.FRIDAY
    assert "subtract 1" in tips[2]


def test_shakuntala_devi_nearest_leap_year_fallback():
    weekday, tips = shakuntala_devi(date(1931, 5, 15))
    assert weekday == Weekday.FRIDAY
    assert tips == [
        "Step 1: day 15 mod 7 plus month entry 1 gives 2",
        "Step 2: 1931 has no direct year table entry",
        "Step 2: Nearest leap year before 1931 is 1928",
        "Step 3: year table entry for 1928 is 0, plus 3 year(s) since then",
        "Step 4: 5 mod 7 is 5, counting from Sunday = 0",
    ]


def test_shakuntala_devi_century_year_in_table():
    weekday, tips = shakuntala_devi(date(1900, 3, 1))
    assert weekday == Weekday.THURSDAY
    assert tips[1] == "Step 2: 1900 is in the year table but is not a leap year"
    assert tips[2] == "Step 2: Nearest leap year before 1900 is 1896"


def test_shakuntala_devi_leap_year_without_own_entry():
    weekday, tips = shakuntala_devi(date(2204, 3, 1))
    assert weekday == Weekday.THURSDAY
    assert tips == [
        "Step 1: day 1 mod 7 plus month entry 3 gives 4",
        "Step 2: 2204 has no direct year table entry",
        "Step 2: Nearest leap year before 2204 is 2196",
        "Step 3: year table entry for 2196 is 5, plus 8 year(s) since then",
        "Step 3: 2204 is a leap year past February, add 1",
        "Step 4: 18 mod 7 is 4, counting from Sunday = 0",
    ]
    assert shakuntala_devi(date(2204, 2, 29))[0] == Weekday.WEDNESDAY
    assert shakuntala_devi(date(2204, 12, 31))[0] == Weekday.MONDAY


def test_shakuntala_devi_is_idempotent():
    assert shakuntala_devi(date(2016, 2, 29)) == shakuntala_devi(date(2016, 2, 29))


def test_shakuntala_devi_outside_table():
    with pytest.raises(YearOutOfRangeError):
        shakuntala_devi(date(1500, 3, 1))


def test_nearest_reference_year():
    assert nearest_reference_year(1928) == 1928
    assert nearest_reference_year(1931) == 1928
    assert nearest_reference_year(1900) == 1896
    assert nearest_reference_year(2204) == 2196


def test_nearest_reference_year_trace():
    trace: list[str] = []
    assert nearest_reference_year(1928, trace) == 1928
    assert trace == ["1928 is a leap year with a direct year table entry"]

    trace = ["kept"]
    nearest_reference_year(2203, trace)
    assert trace == [
        "kept",
        "2203 has no direct year table entry",
        "Nearest leap year before 2203 is 2196",
    ]


def test_doomsday_anchor():
    assert core.doomsday_anchor(1850) == 5
    assert core.doomsday_anchor(1999) == 3
    assert core.doomsday_anchor(2000) == 2
    assert core.doomsday_anchor(2199) == 0
    assert core.year_doomsday(2000) == 2


@pytest.mark.parametrize("year", [1799, 2200, 1066])
def test_doomsday_unsupported_century(year):
    with pytest.raises(UnsupportedCenturyError):
        core.doomsday(date(year, 6, 1))


def test_svm_86_base_date_is_monday():
    assert core.svm_86(core.SVM_86_BASE_DATE) == Weekday.MONDAY
    assert core.svm_86_distance(date(1583, 1, 4)) - core.svm_86_distance(
        core.SVM_86_BASE_DATE
    ) == 1
