from django.conf import settings

from .core import DEFAULT_FIRST_YEAR, DEFAULT_LAST_YEAR


def default_year_range() -> tuple[int, int]:
    first = int(getattr(settings, "DEVI_FIRST_YEAR", DEFAULT_FIRST_YEAR))
    last = int(getattr(settings, "DEVI_LAST_YEAR", DEFAULT_LAST_YEAR))
    return first, last


def rng_seed() -> int | None:
    seed = getattr(settings, "DEVI_RNG_SEED", None)
    return None if seed is None else int(seed)
