"""Lookup tables used by the weekday algorithms.

The month table and the doomsday-of-month tables are plain constants.  The
year table is derived: every fourth year of each century band gets a
remainder taken from a fixed 7-cycle plus a per-band offset.  It is built on
first use, exactly once per process, and is read-only afterwards.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Shakuntala Devi month contributions, January first.
MONTH_TABLE: tuple[int, ...] = (0, 3, 3, 6, 1, 4, 6, 2, 5, 0, 3, 5)

# Day of each month that falls on the year's doomsday.
DOOMSDAYS_COMMON: tuple[int, ...] = (3, 28, 14, 4, 9, 6, 11, 8, 5, 10, 7, 12)
DOOMSDAYS_LEAP: tuple[int, ...] = (4, 29, 14, 4, 9, 6, 11, 8, 5, 10, 7, 12)

YEAR_CYCLE: tuple[int, ...] = (0, 5, 3, 1, 6, 4, 2)

# (first year, end year exclusive, offset)
YEAR_BANDS: tuple[tuple[int, int, int], ...] = (
    (1584, 1600, 0),
    (1600, 1700, 6),
    (1700, 1800, 4),
    (1800, 1900, 2),
    (1900, 2000, 0),
    (2000, 2100, 6),
    (2100, 2200, 4),
)

_year_table: Mapping[int, int] | None = None
_year_table_lock = threading.Lock()


def build_year_table() -> Mapping[int, int]:
    """Return a fresh year table.

    The cycle restarts at the first year of every band, so ``1600`` and
    ``1700`` both start from ``YEAR_CYCLE[0]`` plus their own offset.
    """

    table: dict[int, int] = {}
    for first, end, offset in YEAR_BANDS:
        for index, year in enumerate(range(first, end, 4)):
            table[year] = (YEAR_CYCLE[index % len(YEAR_CYCLE)] + offset) % 7
    return MappingProxyType(table)


def year_table() -> Mapping[int, int]:
    """Return the process-wide year table, building it on first call."""

    global _year_table
    table = _year_table
    if table is not None:
        return table
    with _year_table_lock:
        if _year_table is None:
            _year_table = build_year_table()
            logger.debug("year table built with %d entries", len(_year_table))
        return _year_table


def month_table_value(month: int) -> int:
    """Return the month table entry for ``month`` (1-12)."""

    if not 1 <= month <= 12:
        raise ValueError("month out of range")
    return MONTH_TABLE[month - 1]
