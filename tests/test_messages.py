"""
Tests for outcome and label text
"""
from guessnumber.messages import (
    instructions_text, invalid_guess_message, outcome_message,
    prompt_text, score_text
)
from guessnumber.session import Outcome


def test_outcome_messages():
    assert outcome_message(Outcome.too_low()) == "Too low! Try again."
    assert outcome_message(Outcome.too_high()) == "Too high! Try again."
    assert outcome_message(Outcome.correct(4)) == "Correct! You guessed the number in 4 attempts."
    assert outcome_message(Outcome.invalid()) == "Please enter a valid number between 1 and 100."


def test_range_is_reflected_in_text():
    assert invalid_guess_message(20) == "Please enter a valid number between 1 and 20."
    assert prompt_text(20) == "Guess a number between 1 and 20"
    assert "between 1 and 20" in instructions_text(20)


def test_score_label():
    assert score_text(0) == "Score: 0"
    assert score_text(12) == "Score: 12"


def test_instructions_list_six_steps():
    text = instructions_text()
    for step in range(1, 7):
        assert f"\n{step}. " in text
