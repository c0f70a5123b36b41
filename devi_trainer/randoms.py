from __future__ import annotations

import logging
import random
from datetime import date

from .core import Weekday
from .shakuntala import Tips, shakuntala_devi

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def rng_for(seed: int | None) -> random.Random:
    """Return a generator seeded with ``seed``; ``None`` gives an unseeded one."""
    if seed is None:
        return random.Random()
    return random.Random(int(seed))


def random_date(from_year: int, to_year: int, rng: random.Random | None = None) -> date:
    """Return a date drawn uniformly from ``[1 Jan from_year, 1 Jan to_year)``."""

    if from_year >= to_year:
        raise ValueError(f"from_year ({from_year}) must be lower than to_year ({to_year})")
    rng = rng or _default_rng
    start = date(from_year, 1, 1).toordinal()
    end = date(to_year, 1, 1).toordinal()
    picked = date.fromordinal(rng.randrange(start, end))
    logger.debug("random date %s drawn from [%d, %d)", picked, from_year, to_year)
    return picked


def random_date_with_tips(
    from_year: int, to_year: int, rng: random.Random | None = None
) -> tuple[date, Weekday, Tips]:
    picked = random_date(from_year, to_year, rng)
    answer, tips = shakuntala_devi(picked)
    return picked, answer, tips
