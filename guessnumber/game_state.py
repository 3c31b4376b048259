"""Main game window: event loop, menu actions and modal dialogs."""

import logging
import os
import pygame
from enum import Enum, auto
from typing import Optional, Union

from guessnumber.constants import (
    WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, FPS, EXIT_STATUS,
    FEEDBACK_FILE, CURSOR_BLINK_INTERVAL
)
from guessnumber.feedback import FeedbackWriteError, append_feedback
from guessnumber.messages import (
    FEEDBACK_ERROR_MESSAGE, FEEDBACK_SAVED_MESSAGE, FEEDBACK_TITLE,
    INSTRUCTIONS_TITLE, instructions_text, outcome_message
)
from guessnumber.renderer import Renderer
from guessnumber.session import GameSession, Outcome, OutcomeKind
from guessnumber.ui.dialogs import FeedbackDialog, MessageDialog
from guessnumber.ui.guess_panel import GuessPanel
from guessnumber.ui.menu import OptionsMenu

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game state enumeration."""
    PLAYING = auto()
    DIALOG = auto()


class Game:
    """Main game class owning the session, the widgets and the game loop."""

    def __init__(
        self,
        session: Optional[GameSession] = None,
        feedback_path: Union[str, os.PathLike] = FEEDBACK_FILE
    ):
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.clock = pygame.time.Clock()
        self.running = True
        self.exit_status = EXIT_STATUS
        self.cursor_visible = True

        self.session = session if session is not None else GameSession()
        self.feedback_path = feedback_path

        # Initialize renderer and UI components
        self.renderer = Renderer(self.screen)
        self.menu = OptionsMenu(self.renderer)
        self.panel = GuessPanel(self.renderer, self.session.range_max)

        self.state = GameState.PLAYING
        self.dialog: Optional[Union[MessageDialog, FeedbackDialog]] = None

        self.panel.set_score(self.session.score)
        pygame.key.start_text_input()

    def submit_guess(self) -> Outcome:
        """Send the field's text to the session and show the result."""
        outcome = self.session.submit_guess(self.panel.field.text)
        message = outcome_message(outcome, self.session.range_max)

        if outcome.kind == OutcomeKind.INVALID:
            self.open_dialog(MessageDialog(self.renderer, WINDOW_TITLE, message))
        else:
            self.panel.set_result(message)

        self.panel.set_score(self.session.score)
        return outcome

    def restart(self):
        """Start a new round and clear the play area."""
        self.session.reset()
        self.panel.reset()
        self.panel.set_score(self.session.score)
        logger.info("Game restarted")

    def show_instructions(self):
        self.open_dialog(MessageDialog(self.renderer, INSTRUCTIONS_TITLE, instructions_text(self.session.range_max)))

    def send_feedback(self):
        self.open_dialog(FeedbackDialog(self.renderer, FEEDBACK_TITLE))

    def save_feedback(self, text: str):
        """Append feedback to the log and report how it went."""
        try:
            append_feedback(text, self.feedback_path)
        except FeedbackWriteError:
            logger.exception("Failed to save feedback")
            self.open_dialog(MessageDialog(self.renderer, WINDOW_TITLE, FEEDBACK_ERROR_MESSAGE))
            return
        self.open_dialog(MessageDialog(self.renderer, WINDOW_TITLE, FEEDBACK_SAVED_MESSAGE))

    def quit(self):
        """Stop the game loop; run() then returns the exit status."""
        self.running = False

    def open_dialog(self, dialog: Union[MessageDialog, FeedbackDialog]):
        self.menu.close()
        self.dialog = dialog
        self.state = GameState.DIALOG

    def close_dialog(self):
        self.dialog = None
        self.state = GameState.PLAYING

    def _handle_menu_action(self, action: str):
        if action == "instructions":
            self.show_instructions()
        elif action == "feedback":
            self.send_feedback()
        elif action == "restart":
            self.restart()
        elif action == "exit":
            self.quit()

    def _handle_dialog_action(self, action: str):
        dialog = self.dialog
        self.close_dialog()
        if isinstance(dialog, FeedbackDialog) and action == "ok":
            self.save_feedback(dialog.text)

    def handle_event(self, event: pygame.event.Event):
        """Route a single event to whichever widget currently has input."""
        if event.type == pygame.QUIT:
            self.quit()
            return

        if self.state == GameState.DIALOG:
            action = self.dialog.handle_event(event)
            if action:
                self._handle_dialog_action(action)

        elif self.state == GameState.PLAYING:
            # Menu gets the first look; a click that opens or closes it goes no further
            menu_was_open = self.menu.is_open
            action = self.menu.handle_event(event)
            if action:
                self._handle_menu_action(action)
            elif not menu_was_open and not self.menu.is_open:
                if self.panel.handle_event(event) == "submit":
                    self.submit_guess()

    def handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)
            if not self.running:
                return

    def update(self):
        """Update game state."""
        ticks = pygame.time.get_ticks()
        self.cursor_visible = (ticks // CURSOR_BLINK_INTERVAL) % 2 == 0

    def draw(self):
        """Draw the current game state."""
        self.renderer.clear()
        self.panel.draw(self.cursor_visible and self.state == GameState.PLAYING)
        self.menu.draw()

        if self.state == GameState.DIALOG:
            if isinstance(self.dialog, FeedbackDialog):
                self.dialog.draw(self.cursor_visible)
            else:
                self.dialog.draw()

        pygame.display.flip()

    def run(self) -> int:
        """Main game loop. Returns the process exit status."""
        while self.running:
            self.handle_events()
            self.update()
            self.draw()
            self.clock.tick(FPS)

        pygame.quit()
        return self.exit_status
