"""Game session: the secret number, the attempt counter and guess evaluation."""

import logging
import re
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import numpy as np

from guessnumber.constants import LOWEST_SCORE, MINIMUM_GUESS_VALUE, NUMBER_RANGE

logger = logging.getLogger(__name__)

# Optional sign, then decimal digits from any script
_INTEGER_PATTERN = re.compile(r"([+-]?)(\d+)")


class OutcomeKind(Enum):
    """Kinds of result a single guess can produce."""
    TOO_LOW = auto()
    TOO_HIGH = auto()
    CORRECT = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Outcome:
    """Result of one guess submission.

    ``attempts`` is only set for ``CORRECT`` and counts the winning guess.
    """
    kind: OutcomeKind
    attempts: Optional[int] = None

    @classmethod
    def too_low(cls) -> "Outcome":
        return cls(OutcomeKind.TOO_LOW)

    @classmethod
    def too_high(cls) -> "Outcome":
        return cls(OutcomeKind.TOO_HIGH)

    @classmethod
    def correct(cls, attempts: int) -> "Outcome":
        return cls(OutcomeKind.CORRECT, attempts)

    @classmethod
    def invalid(cls) -> "Outcome":
        return cls(OutcomeKind.INVALID)


def parse_guess(raw_input, range_max: int = NUMBER_RANGE) -> Optional[int]:
    """Parse raw field text into a guess, or None if it is not a legal guess.

    Any Unicode decimal digits are accepted and leading zeros are ignored.
    Inputs with more significant digits than ``range_max`` are rejected
    before conversion, so arbitrarily long text never reaches ``int()``.
    """
    if not isinstance(raw_input, str):
        return None
    match = _INTEGER_PATTERN.fullmatch(raw_input)
    if not match:
        return None

    sign, digits = match.groups()
    digits = "".join(str(unicodedata.decimal(ch)) for ch in digits).lstrip("0") or "0"
    if len(digits) > len(str(range_max)):
        return None

    value = -int(digits) if sign == "-" else int(digits)
    if value < MINIMUM_GUESS_VALUE or value > range_max:
        return None
    return value


class GameSession:
    """One player's game: a secret target and the attempts spent on it.

    The target is drawn on construction and on every ``reset()``. A correct
    guess zeroes the score but keeps the target.
    """

    def __init__(
        self,
        range_max: int = NUMBER_RANGE,
        rng: Optional[np.random.Generator] = None,
        target: Optional[int] = None
    ):
        if range_max < MINIMUM_GUESS_VALUE:
            raise ValueError(f"range_max must be at least {MINIMUM_GUESS_VALUE}, got {range_max}")
        if target is not None and not MINIMUM_GUESS_VALUE <= target <= range_max:
            raise ValueError(f"target must lie in [{MINIMUM_GUESS_VALUE}, {range_max}], got {target}")

        self.range_max = range_max
        self.rng = rng if rng is not None else np.random.default_rng()
        self.target_number = MINIMUM_GUESS_VALUE
        self.score = LOWEST_SCORE

        self.reset()
        if target is not None:
            self.target_number = target

    def _draw_target(self) -> int:
        """Draw a target uniformly from [1, range_max]."""
        return int(self.rng.integers(MINIMUM_GUESS_VALUE, self.range_max + 1))

    def reset(self):
        """Start a new round with a fresh target and a zero score."""
        self.target_number = self._draw_target()
        self.score = LOWEST_SCORE
        logger.debug("New round started (range 1-%d)", self.range_max)

    def submit_guess(self, raw_input: str) -> Outcome:
        """Evaluate one guess. Invalid input never costs an attempt."""
        guess = parse_guess(raw_input, self.range_max)
        if guess is None:
            logger.debug("Rejected guess %r", raw_input)
            return Outcome.invalid()

        self.score += 1

        if guess < self.target_number:
            return Outcome.too_low()
        if guess > self.target_number:
            return Outcome.too_high()

        attempts = self.score
        self.score = LOWEST_SCORE
        logger.debug("Target guessed in %d attempts", attempts)
        return Outcome.correct(attempts)
