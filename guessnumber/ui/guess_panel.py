"""Main play area: prompt, guess field, submit button, result and score."""

import pygame
from typing import Optional
from guessnumber.constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, MENU_BAR_HEIGHT, TEXT_FIELD_WIDTH,
    TEXT_FIELD_HEIGHT, BUTTON_WIDTH, BUTTON_HEIGHT, NUMBER_RANGE,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_MUTED
)
from guessnumber.messages import prompt_text, score_text
from guessnumber.ui.text_input import TextField


class GuessPanel:
    """Widgets the player guesses with."""

    def __init__(self, renderer, range_max: int = NUMBER_RANGE):
        self.renderer = renderer
        self.range_max = range_max

        self.result_text = ""
        self.score_text = score_text(0)

        w = WINDOW_WIDTH
        top = MENU_BAR_HEIGHT
        self.prompt_pos = (w // 2, top + int(WINDOW_HEIGHT * 0.12))
        self.field = TextField(
            pygame.Rect(
                w // 2 - TEXT_FIELD_WIDTH // 2,
                top + int(WINDOW_HEIGHT * 0.2),
                TEXT_FIELD_WIDTH,
                TEXT_FIELD_HEIGHT
            ),
            focused=True
        )
        self.submit_button = pygame.Rect(
            w // 2 - BUTTON_WIDTH // 2,
            self.field.rect.bottom + 16,
            BUTTON_WIDTH,
            BUTTON_HEIGHT
        )
        self.result_pos = (w // 2, self.submit_button.bottom + 36)
        self.score_pos = (w // 2, self.result_pos[1] + 36)

    def reset(self):
        """Clear the result label and the guess field."""
        self.result_text = ""
        self.field.clear()

    def set_result(self, text: str):
        self.result_text = text

    def set_score(self, score: int):
        self.score_text = score_text(score)

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'submit' when a guess is submitted."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.submit_button.collidepoint(event.pos):
                return "submit"
        return self.field.handle_event(event)

    def draw(self, cursor_visible: bool = True):
        self.renderer.draw_text(
            prompt_text(self.range_max),
            self.prompt_pos,
            COLOR_TEXT,
            font_size="large",
            center=True
        )

        self.field.draw(self.renderer, cursor_visible)

        hovered = self.submit_button.collidepoint(pygame.mouse.get_pos())
        self.renderer.draw_button(self.submit_button, "Submit Guess", hovered)

        if self.result_text:
            self.renderer.draw_text(
                self.result_text,
                self.result_pos,
                COLOR_TEXT_HIGHLIGHT,
                font_size="small",
                center=True
            )

        self.renderer.draw_text(
            self.score_text,
            self.score_pos,
            COLOR_TEXT_MUTED,
            font_size="medium",
            center=True
        )
