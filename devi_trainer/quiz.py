"""Quiz rounds and table drills built on the Shakuntala Devi engine.

A round holds one random date, the engine's answer and its tips.  Every
wrong weekday reveals the next tip; guessing the same wrong weekday twice
does not cost a tip.  The drills ask for a single table entry instead of a
whole weekday.
"""

from __future__ import annotations

import logging
import random
import time
from collections import deque
from dataclasses import dataclass, field
from datetime import date

from .conf import default_year_range, rng_seed
from .core import Weekday
from .randoms import random_date_with_tips, rng_for
from .shakuntala import nearest_reference_year, year_table_value
from .tables import month_table_value
from .validators import validate_table_guess, validate_year_range

logger = logging.getLogger(__name__)

NO_MORE_TIPS = "Sorry, no more tips"


@dataclass(frozen=True)
class GuessOutcome:
    correct: bool
    tries: int
    message: str
    elapsed: float = 0.0


@dataclass(frozen=True)
class TrainingOutcome:
    correct: bool
    answer: int
    message: str


@dataclass
class QuizRound:
    day: date
    answer: Weekday
    tips: list[str]
    guessed: set[Weekday] = field(default_factory=set)
    finished: bool = False
    started: float = field(default_factory=time.monotonic)
    _pending: deque[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pending = deque(self.tips)

    @property
    def tries(self) -> int:
        return len(self.guessed)

    @property
    def remaining_tips(self) -> int:
        return len(self._pending)

    @property
    def solution(self) -> str:
        return "\n".join(self.tips)

    def guess(self, weekday: Weekday | int) -> GuessOutcome:
        validate_table_guess(int(weekday))
        weekday = Weekday(weekday)
        elapsed = time.monotonic() - self.started
        if self.finished:
            return GuessOutcome(
                weekday == self.answer, self.tries, f"Already solved: {self.answer.label}", elapsed
            )

        repeated = weekday in self.guessed
        self.guessed.add(weekday)
        if weekday == self.answer:
            self.finished = True
            logger.debug("round %s solved after %d tries", self.day, self.tries)
            return GuessOutcome(
                True,
                self.tries,
                f"Congratulations! You found {weekday.label} after {self.tries} "
                f"guess(es) in {int(elapsed)}s",
                elapsed,
            )
        if repeated:
            return GuessOutcome(False, self.tries, f"{weekday.label} was already tried", elapsed)
        if self._pending:
            return GuessOutcome(False, self.tries, f"Tip: {self._pending.popleft()}", elapsed)
        return GuessOutcome(False, self.tries, NO_MORE_TIPS, elapsed)


def new_round(
    first_year: int | None = None,
    last_year: int | None = None,
    rng: random.Random | None = None,
) -> QuizRound:
    """Start a round on a random date between ``first_year`` and ``last_year``.

    Missing bounds come from the ``DEVI_FIRST_YEAR`` and ``DEVI_LAST_YEAR``
    settings.
    """

    default_first, default_last = default_year_range()
    first_year = default_first if first_year is None else first_year
    last_year = default_last if last_year is None else last_year
    validate_year_range(first_year, last_year)
    if rng is None:
        rng = rng_for(rng_seed())

    day, answer, tips = random_date_with_tips(first_year, last_year, rng)
    if answer != Weekday.of(day):
        raise RuntimeError(f"Shakuntala Devi method failed for {day}")
    logger.debug("new round on %s (%d tips)", day, len(tips))
    return QuizRound(day=day, answer=answer, tips=tips)


def month_table_answer(day: date) -> int:
    return month_table_value(day.month)


def check_month_table_guess(day: date, guess: int) -> TrainingOutcome:
    validate_table_guess(guess)
    answer = month_table_answer(day)
    if guess == answer:
        return TrainingOutcome(True, answer, f"Congratulations! {guess} is the right answer")
    return TrainingOutcome(False, answer, "Try again")


def year_table_answer(year: int) -> int:
    """Return the year table entry of the year's reference leap year."""

    return year_table_value(nearest_reference_year(year))


def check_year_table_guess(year: int, guess: int) -> TrainingOutcome:
    validate_table_guess(guess)
    reference = nearest_reference_year(year)
    answer = year_table_answer(year)
    if guess == answer:
        return TrainingOutcome(True, answer, f"Congratulations! {guess} is the right answer")
    if reference != year:
        return TrainingOutcome(
            False,
            answer,
            f"Try again. Tip: no direct year table entry, nearest leap year {reference}",
        )
    return TrainingOutcome(False, answer, "Try again, this is a direct year table entry")
