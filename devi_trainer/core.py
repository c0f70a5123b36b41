"""Weekday computation for proleptic Gregorian dates.

Each algorithm works in its own numbering of the week.  Zeller counts from
Saturday, Sakamoto, Doomsday and the Shakuntala Devi method count from
Sunday, the Julian-day formulas count from Monday.  The raw remainder of every
algorithm goes through exactly one of the ``Weekday.from_*`` constructors so
the rotation lives in a single place.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum

from .tables import DOOMSDAYS_COMMON, DOOMSDAYS_LEAP

MIN_YEAR: int = 1583
MAX_YEAR: int = 2204
DEFAULT_FIRST_YEAR: int = 1932
DEFAULT_LAST_YEAR: int = 2032

SAKAMOTO_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

# Sunday = 0
DOOMSDAY_ANCHORS: dict[int, int] = {18: 5, 19: 3, 20: 2, 21: 0}

SVM_86_BASE_DATE = date(1583, 1, 3)  # a Monday


class UnsupportedCenturyError(ValueError):
    """Raised when the Doomsday rule has no anchor day for a century."""


class YearOutOfRangeError(ValueError):
    """Raised when a year falls outside the Shakuntala Devi year table."""


class Weekday(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, dt: date) -> Weekday:
        """Canonical weekday of ``dt`` as reported by :mod:`datetime`."""
        return cls(dt.weekday())

    @classmethod
    def from_monday_zero_index(cls, index: int) -> Weekday:
        return cls(index % 7)

    @classmethod
    def from_sunday_zero_index(cls, index: int) -> Weekday:
        """Convert a Sunday = 0 remainder (predecessor shift)."""
        return cls.from_monday_zero_index(index).pred()

    @classmethod
    def from_zeller_index(cls, index: int) -> Weekday:
        """Convert a Zeller remainder where 0 is Saturday."""
        return cls((index + 5) % 7)

    def pred(self) -> Weekday:
        return Weekday((self - 1) % 7)

    @property
    def label(self) -> str:
        return self.name.capitalize()


def leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def zeller(dt: date) -> Weekday:
    """Zeller's congruence.

    January and February are counted as months 13 and 14 of the previous
    year.
    """

    year, month = dt.year, dt.month
    if month < 3:
        month += 12
        year -= 1
    h = (dt.day + 13 * (month + 1) // 5 + year + year // 4 - year // 100 + year // 400) % 7
    return Weekday.from_zeller_index(h)


def tomohiko_sakamoto(dt: date) -> Weekday:
    """Tomohiko Sakamoto's algorithm."""

    year = dt.year - 1 if dt.month < 3 else dt.year
    index = (
        year + year // 4 - year // 100 + year // 400 + SAKAMOTO_OFFSETS[dt.month - 1] + dt.day
    ) % 7
    return Weekday.from_sunday_zero_index(index)


def doomsday_anchor(year: int) -> int:
    """Return the anchor day (Sunday = 0) of the century containing ``year``.

    Only the 1800s to the 2100s are known; other centuries raise
    :class:`UnsupportedCenturyError`.
    """

    try:
        return DOOMSDAY_ANCHORS[year // 100]
    except KeyError:
        raise UnsupportedCenturyError(
            f"no doomsday anchor for year {year}; supported years are 1800-2199"
        ) from None


def year_doomsday(year: int) -> int:
    """Return the doomsday (Sunday = 0) of ``year``."""

    y2 = year % 100
    return (y2 // 12 + y2 % 12 + (y2 % 12) // 4 + doomsday_anchor(year)) % 7


def doomsday(dt: date) -> Weekday:
    """Conway's Doomsday rule."""

    table = DOOMSDAYS_LEAP if leap_year(dt.year) else DOOMSDAYS_COMMON
    index = (year_doomsday(dt.year) + dt.day - table[dt.month - 1]) % 7
    return Weekday.from_sunday_zero_index(index)


def st_mag_53(dt: date) -> Weekday:
    # Julian day number with the float truncations of the published recipe;
    # keep the order of operations as is.  The century term has the wrong sign
    # for ap // 400, so results only hold from March 1600 to February 2000.
    j, m, a = dt.day, dt.month, dt.year
    man = int(0.6 + 1.0 / m + 0.001)
    mp = m + 12 * man
    ap = a - man
    jd = j + int((367.0 * (mp - 1.0) + 5.0) / 12.0 + 0.001) + int(365.25 * (ap + 4712.0) + 0.001)
    jd = jd - (int(ap / 100.0) + int(ap / 400.0))
    js = (jd - 1720977) / 7.0
    index = int(7.0 * (js - int(js)) + 0.001)
    return Weekday.from_monday_zero_index(index)


def svm_86_distance(dt: date) -> int:
    """Return the day count of ``dt`` used by :func:`svm_86`."""

    j, m, a = dt.day, dt.month, dt.year
    n = a * 365 + 31 * (m - 1) + j
    if m <= 2:
        a -= 1
    n = n + a // 4 - a // 100 + a // 400
    if m > 2:
        n -= int((m - 1) * 0.4 + 2.7)
    return n


def svm_86(dt: date) -> Weekday:
    distance = svm_86_distance(dt) - svm_86_distance(SVM_86_BASE_DATE)
    return Weekday.from_monday_zero_index(distance)
