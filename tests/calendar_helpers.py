from collections.abc import Iterator
from datetime import date


def iter_days(first: date, last: date) -> Iterator[date]:
    """Yield every date from ``first`` to ``last`` inclusive."""
    for ordinal in range(first.toordinal(), last.toordinal() + 1):
        yield date.fromordinal(ordinal)


def has_feb_29(year: int) -> bool:
    try:
        date(year, 2, 29)
    except ValueError:
        return False
    return True
