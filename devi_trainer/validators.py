"""Validators for quiz configuration and answers."""

from django.core.exceptions import ValidationError

from .core import MAX_YEAR, MIN_YEAR


def validate_year_range(first_year: int, last_year: int) -> None:
    """Validate the year range a quiz draws its dates from.

    The year table starts in 1584, so ``MIN_YEAR`` itself is excluded.
    """
    if not MIN_YEAR < first_year <= MAX_YEAR:
        raise ValidationError(f"First year must be after {MIN_YEAR} and at most {MAX_YEAR}")
    if not MIN_YEAR < last_year <= MAX_YEAR:
        raise ValidationError(f"Last year must be after {MIN_YEAR} and at most {MAX_YEAR}")
    if first_year >= last_year:
        raise ValidationError(f"First year {first_year} must be lower than last year {last_year}")


def validate_table_guess(guess: int) -> None:
    if not 0 <= guess <= 6:
        raise ValidationError("Guess must be between 0 and 6")
