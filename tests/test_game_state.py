"""
Tests for the game window wiring, driven with synthetic pygame events
"""
import logging

import pygame

from guessnumber.game_state import GameState
from guessnumber.messages import (
    FEEDBACK_ERROR_MESSAGE, FEEDBACK_SAVED_MESSAGE, INSTRUCTIONS_TITLE
)
from guessnumber.ui.dialogs import FeedbackDialog, MessageDialog


def click(game, pos):
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))


def press(game, key):
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def type_text(game, text):
    game.handle_event(pygame.event.Event(pygame.TEXTINPUT, text=text))


def choose_menu_item(game, action):
    click(game, game.menu.title_rect.center)
    assert game.menu.is_open
    rect = next(rect for item_action, rect, _ in game.menu.items if item_action == action)
    click(game, rect.center)


def guess(game, text):
    game.panel.field.clear()
    type_text(game, text)
    press(game, pygame.K_RETURN)


def test_starts_with_zero_score(game):
    assert game.state == GameState.PLAYING
    assert game.panel.score_text == "Score: 0"
    assert game.panel.result_text == ""


def test_enter_submits_typed_guess(game):
    type_text(game, "1")
    type_text(game, "0")
    press(game, pygame.K_RETURN)

    assert game.panel.result_text == "Too low! Try again."
    assert game.panel.score_text == "Score: 1"


def test_backspace_edits_the_field(game):
    type_text(game, "99")
    press(game, pygame.K_BACKSPACE)

    assert game.panel.field.text == "9"


def test_submit_button_submits(game):
    type_text(game, "90")
    click(game, game.panel.submit_button.center)

    assert game.panel.result_text == "Too high! Try again."
    assert game.session.score == 1


def test_correct_guess_reports_attempts_and_resets_score(game):
    guess(game, "10")
    guess(game, "90")
    guess(game, "50")

    assert game.panel.result_text == "Correct! You guessed the number in 3 attempts."
    assert game.panel.score_text == "Score: 0"
    assert game.session.target_number == 50


def test_invalid_guess_opens_alert(game):
    guess(game, "10")
    guess(game, "abc")

    assert game.state == GameState.DIALOG
    assert isinstance(game.dialog, MessageDialog)
    assert game.dialog.message == "Please enter a valid number between 1 and 100."
    assert game.panel.result_text == "Too low! Try again."
    assert game.panel.score_text == "Score: 1"


def test_alert_blocks_input_until_dismissed(game):
    guess(game, "0")
    type_text(game, "7")
    press(game, pygame.K_RETURN)

    assert game.panel.field.text == "0"
    assert game.state == GameState.PLAYING
    assert game.session.score == 0


def test_alert_ok_button_closes_it(game):
    guess(game, "101")
    click(game, game.dialog.ok_button.center)

    assert game.dialog is None
    assert game.state == GameState.PLAYING


def test_restart_clears_round(game):
    guess(game, "10")

    choose_menu_item(game, "restart")

    assert game.session.score == 0
    assert 1 <= game.session.target_number <= 100
    assert game.panel.score_text == "Score: 0"
    assert game.panel.result_text == ""
    assert game.panel.field.text == ""


def test_how_to_play_shows_instructions(game):
    choose_menu_item(game, "instructions")

    assert isinstance(game.dialog, MessageDialog)
    assert game.dialog.title == INSTRUCTIONS_TITLE
    assert "Submit Guess" in game.dialog.message

    press(game, pygame.K_ESCAPE)
    assert game.state == GameState.PLAYING


def test_feedback_ok_appends_to_file(game, feedback_path):
    choose_menu_item(game, "feedback")
    assert isinstance(game.dialog, FeedbackDialog)

    type_text(game, "Great")
    press(game, pygame.K_RETURN)
    type_text(game, "fun")
    click(game, game.dialog.ok_button.center)

    assert feedback_path.read_text(encoding="utf-8") == "Great\nfun\n"
    assert isinstance(game.dialog, MessageDialog)
    assert game.dialog.message == FEEDBACK_SAVED_MESSAGE


def test_feedback_cancel_writes_nothing(game, feedback_path):
    choose_menu_item(game, "feedback")
    type_text(game, "never mind")
    click(game, game.dialog.cancel_button.center)

    assert not feedback_path.exists()
    assert game.state == GameState.PLAYING


def test_feedback_write_failure_is_reported(game, tmp_path, caplog):
    game.feedback_path = tmp_path
    guess(game, "20")

    with caplog.at_level(logging.ERROR, logger="guessnumber.game_state"):
        choose_menu_item(game, "feedback")
        type_text(game, "lost")
        click(game, game.dialog.ok_button.center)

    assert game.dialog.message == FEEDBACK_ERROR_MESSAGE
    assert "Failed to save feedback" in caplog.text
    assert game.running
    assert game.session.score == 1


def test_click_outside_open_menu_only_closes_it(game):
    type_text(game, "30")
    click(game, game.menu.title_rect.center)
    click(game, game.panel.submit_button.center)

    assert not game.menu.is_open
    assert game.panel.result_text == ""
    assert game.session.score == 0


def test_exit_stops_loop_with_status_zero(game):
    choose_menu_item(game, "exit")

    assert not game.running
    assert game.run() == 0


def test_window_close_stops_loop(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))

    assert not game.running


def test_draw_every_state(game):
    game.update()
    game.draw()

    click(game, game.menu.title_rect.center)
    game.draw()

    feedback_rect = next(rect for action, rect, _ in game.menu.items if action == "feedback")
    click(game, feedback_rect.center)
    assert isinstance(game.dialog, FeedbackDialog)
    game.draw()

    press(game, pygame.K_ESCAPE)
    guess(game, "abc")
    game.draw()
