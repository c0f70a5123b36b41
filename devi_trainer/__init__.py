"""Day-of-the-week algorithms and the Shakuntala Devi quiz."""

from .core import (
    DEFAULT_FIRST_YEAR,
    DEFAULT_LAST_YEAR,
    MAX_YEAR,
    MIN_YEAR,
    UnsupportedCenturyError,
    Weekday,
    YearOutOfRangeError,
    doomsday,
    leap_year,
    st_mag_53,
    svm_86,
    tomohiko_sakamoto,
    zeller,
)
from .randoms import random_date, random_date_with_tips
from .shakuntala import nearest_reference_year, shakuntala_devi
from .tables import DOOMSDAYS_COMMON, DOOMSDAYS_LEAP, MONTH_TABLE, year_table
from .weekday import Algorithm, weekday_for

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DEFAULT_FIRST_YEAR",
    "DEFAULT_LAST_YEAR",
    "MONTH_TABLE",
    "DOOMSDAYS_COMMON",
    "DOOMSDAYS_LEAP",
    "Weekday",
    "Algorithm",
    "UnsupportedCenturyError",
    "YearOutOfRangeError",
    "leap_year",
    "year_table",
    "zeller",
    "tomohiko_sakamoto",
    "doomsday",
    "st_mag_53",
    "svm_86",
    "shakuntala_devi",
    "nearest_reference_year",
    "weekday_for",
    "random_date",
    "random_date_with_tips",
]
