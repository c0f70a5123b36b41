"""Shakuntala Devi's mental method for the day of the week.

The weekday is the sum of three small remainders:

* the day of month plus the month table entry,
* the year table entry of the year, or of the nearest earlier leap year plus
  the number of years since then,
* a correction of -1 for January and February of a leap year, since the
  leap day has not happened yet.

The sum is taken modulo 7 with Sunday as 0.  The tip-producing variant keeps
a human readable line for each step so a quiz can reveal them one at a time.
"""

from __future__ import annotations

from datetime import date

from .core import Weekday, YearOutOfRangeError, leap_year
from .tables import MONTH_TABLE, year_table

Tips = list[str]


def nearest_reference_year(year: int, trace: list[str] | None = None) -> int:
    """Return the year whose table entry is used for ``year``.

    That is ``year`` itself when it is a leap year with a table entry,
    otherwise the nearest leap year strictly before ``year``.  When ``trace``
    is given, a description of the decision is appended to it.
    """

    table = year_table()
    if year in table and leap_year(year):
        if trace is not None:
            trace.append(f"{year} is a leap year with a direct year table entry")
        return year

    nearest = year - 1
    while not leap_year(nearest):
        nearest -= 1
    if trace is not None:
        if year in table:
            trace.append(f"{year} is in the year table but is not a leap year")
        else:
            trace.append(f"{year} has no direct year table entry")
        trace.append(f"Nearest leap year before {year} is {nearest}")
    return nearest


def year_table_value(year: int) -> int:
    try:
        return year_table()[year]
    except KeyError:
        raise YearOutOfRangeError(f"year {year} is outside the year table") from None


def shakuntala_devi(dt: date) -> tuple[Weekday, Tips]:
    """Return the weekday of ``dt`` and the ordered list of steps taken."""

    tips: Tips = []
    step1 = (dt.day % 7 + MONTH_TABLE[dt.month - 1]) % 7
    tips.append(
        f"Step 1: day {dt.day} mod 7 plus month entry {MONTH_TABLE[dt.month - 1]} "
        f"gives {step1}"
    )

    trace: list[str] = []
    reference = nearest_reference_year(dt.year, trace)
    value = year_table_value(reference)
    if reference == dt.year:
        tips.append(f"Step 2: year table entry for {dt.year} is {value}")
        if dt.month > 2:
            total = step1 + value
        else:
            total = step1 + value - 1
            tips.append("Step 3: January or February of a leap year, subtract 1")
    else:
        tips.extend(f"Step 2: {line}" for line in trace)
        elapsed = dt.year - reference
        tips.append(
            f"Step 3: year table entry for {reference} is {value}, "
            f"plus {elapsed} year(s) since then"
        )
        total = step1 + value + elapsed
        if leap_year(dt.year) and dt.month > 2:
            # leap year without its own entry: its 29 February has passed
            total += 1
            tips.append(f"Step 3: {dt.year} is a leap year past February, add 1")

    weekday = Weekday.from_sunday_zero_index(total)
    tips.append(f"Step 4: {total} mod 7 is {total % 7}, counting from Sunday = 0")
    return weekday, tips


def shakuntala_devi_weekday(dt: date) -> Weekday:
    return shakuntala_devi(dt)[0]
