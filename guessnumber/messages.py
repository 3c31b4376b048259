"""User-facing text for outcomes, labels and dialogs."""

from guessnumber.constants import NUMBER_RANGE
from guessnumber.session import Outcome, OutcomeKind

TOO_LOW_MESSAGE = "Too low! Try again."
TOO_HIGH_MESSAGE = "Too high! Try again."
FEEDBACK_SAVED_MESSAGE = "Feedback submitted successfully."
FEEDBACK_ERROR_MESSAGE = "Error saving feedback."
FEEDBACK_TITLE = "Enter your feedback"
INSTRUCTIONS_TITLE = "How to Play"


def prompt_text(range_max: int = NUMBER_RANGE) -> str:
    return f"Guess a number between 1 and {range_max}"


def score_text(score: int) -> str:
    return f"Score: {score}"


def invalid_guess_message(range_max: int = NUMBER_RANGE) -> str:
    return f"Please enter a valid number between 1 and {range_max}."


def outcome_message(outcome: Outcome, range_max: int = NUMBER_RANGE) -> str:
    """Map an outcome to the text shown to the player.

    The invalid message belongs in a modal alert; the others go in the
    result label.
    """
    if outcome.kind == OutcomeKind.TOO_LOW:
        return TOO_LOW_MESSAGE
    if outcome.kind == OutcomeKind.TOO_HIGH:
        return TOO_HIGH_MESSAGE
    if outcome.kind == OutcomeKind.CORRECT:
        return f"Correct! You guessed the number in {outcome.attempts} attempts."
    return invalid_guess_message(range_max)


def instructions_text(range_max: int = NUMBER_RANGE) -> str:
    return (
        "Instructions:\n"
        "\n"
        f"1. Enter a number between 1 and {range_max} in the text field.\n"
        "2. Click 'Submit Guess' to check your guess.\n"
        "3. If your guess is too low or too high, you will receive feedback.\n"
        "4. Keep guessing until you find the correct number.\n"
        "5. Your score will be displayed and updated after each guess.\n"
        "6. You can restart the game or exit from the 'Options' menu."
    )
