from datetime import date

import pytest
from django.core.exceptions import ValidationError

from devi_trainer.core import Weekday
from devi_trainer.quiz import (
    NO_MORE_TIPS,
    QuizRound,
    check_month_table_guess,
    check_year_table_guess,
    new_round,
    year_table_answer,
)
from devi_trainer.randoms import rng_for


def test_tips_are_handed_out_in_order():
    r = QuizRound(day=date(1928, 1, 7), answer=Weekday.SATURDAY, tips=["first", "second"])

    out = r.guess(Weekday.MONDAY)
    assert not out.correct
    assert out.message == "Tip: first"
    assert out.tries == 1

    out = r.guess(Weekday.MONDAY)
    assert out.message == "Monday was already tried"
    assert out.tries == 1
    assert r.remaining_tips == 1

    assert r.guess(Weekday.TUESDAY).message == "Tip: second"
    assert r.guess(Weekday.WEDNESDAY).message == NO_MORE_TIPS

    out = r.guess(Weekday.SATURDAY)
    assert out.correct
    assert out.tries == 4
    assert out.message.startswith("Congratulations! You found Saturday after 4 guess(es)")
    assert r.finished


def test_guess_after_solved_does_not_count():
    r = QuizRound(day=date(1928, 1, 7), answer=Weekday.SATURDAY, tips=["t"])
    r.guess(5)
    out = r.guess(Weekday.SUNDAY)
    assert not out.correct
    assert out.message == "Already solved: Saturday"
    assert out.tries == 1
    assert r.remaining_tips == 1
    assert r.guess(Weekday.SATURDAY).correct


def test_guess_must_be_a_weekday():
    r = QuizRound(day=date(1928, 1, 7), answer=Weekday.SATURDAY, tips=[])
    with pytest.raises(ValidationError):
        r.guess(7)


def test_solution_lists_all_tips():
    r = QuizRound(day=date(1928, 1, 7), answer=Weekday.SATURDAY, tips=["a", "b"])
    assert r.solution == "a\nb"


def test_new_round_uses_engine():
    r = new_round(1932, 2032, rng_for(11))
    assert 1932 <= r.day.year < 2032
    assert r.answer == Weekday.of(r.day)
    assert r.tips and r.remaining_tips == len(r.tips)


def test_new_round_defaults_from_settings(settings):
    settings.DEVI_FIRST_YEAR = 2000
    settings.DEVI_LAST_YEAR = 2001
    settings.DEVI_RNG_SEED = 9
    first = new_round()
    second = new_round()
    assert first.day.year == 2000
    assert first.day == second.day


@pytest.mark.parametrize("first_year,last_year", [(1583, 2000), (2000, 2205), (2000, 2000), (2010, 2000)])
def test_new_round_validates_range(first_year, last_year):
    with pytest.raises(ValidationError):
        new_round(first_year, last_year)


def test_new_round_accepts_full_range():
    for seed in range(50):
        r = new_round(1584, 2204, rng_for(seed))
        assert r.answer == Weekday.of(r.day)


def test_month_table_training():
    assert check_month_table_guess(date(2024, 3, 1), 3).correct
    out = check_month_table_guess(date(2024, 3, 1), 4)
    assert not out.correct
    assert out.answer == 3
    assert out.message == "Try again"
    with pytest.raises(ValidationError):
        check_month_table_guess(date(2024, 3, 1), -1)


def test_year_table_training():
    assert year_table_answer(2024) == 1
    assert year_table_answer(1931) == 0
    assert year_table_answer(1900) == 3

    assert check_year_table_guess(2024, 1).correct
    assert check_year_table_guess(2024, 2).message == "Try again, this is a direct year table entry"
    out = check_year_table_guess(1931, 3)
    assert not out.correct
    assert out.message == "Try again. Tip: no direct year table entry, nearest leap year 1928"
