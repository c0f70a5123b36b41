from devi_trainer.conf import default_year_range, rng_seed
from devi_trainer.core import DEFAULT_FIRST_YEAR, DEFAULT_LAST_YEAR


def test_defaults_match_constants():
    assert default_year_range() == (DEFAULT_FIRST_YEAR, DEFAULT_LAST_YEAR)


def test_settings_override(settings):
    settings.DEVI_FIRST_YEAR = "1950"
    settings.DEVI_LAST_YEAR = 1960
    settings.DEVI_RNG_SEED = "12"
    assert default_year_range() == (1950, 1960)
    assert rng_seed() == 12


def test_missing_settings_fall_back(settings):
    del settings.DEVI_FIRST_YEAR
    del settings.DEVI_RNG_SEED
    assert default_year_range()[0] == DEFAULT_FIRST_YEAR
    assert rng_seed() is None
