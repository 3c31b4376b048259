"""Modal dialogs: message alerts and the feedback form."""

import pygame
from typing import Optional
from guessnumber.constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, DIALOG_PADDING, DIALOG_BUTTON_WIDTH,
    BUTTON_HEIGHT, FEEDBACK_AREA_ROWS, COLOR_TEXT, COLOR_TEXT_HIGHLIGHT
)
from guessnumber.ui.text_input import TextField


class MessageDialog:
    """Blocking alert with a message and an OK button."""

    def __init__(self, renderer, title: str, message: str):
        self.renderer = renderer
        self.title = title
        self.message = message

        width = int(WINDOW_WIDTH * 0.86)
        text_width = width - 2 * DIALOG_PADDING
        self.lines = renderer.wrap_text(message, text_width, font_size="small")

        line_height = renderer.font_small.get_linesize()
        title_height = renderer.font_medium.get_linesize()
        height = (
            DIALOG_PADDING * 3 + title_height + line_height * len(self.lines)
            + BUTTON_HEIGHT + DIALOG_PADDING
        )
        height = min(height, WINDOW_HEIGHT - 20)

        self.rect = pygame.Rect(0, 0, width, height)
        self.rect.center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        self.ok_button = pygame.Rect(
            self.rect.centerx - DIALOG_BUTTON_WIDTH // 2,
            self.rect.bottom - DIALOG_PADDING - BUTTON_HEIGHT,
            DIALOG_BUTTON_WIDTH,
            BUTTON_HEIGHT
        )

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'ok' once the dialog is dismissed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ok_button.collidepoint(event.pos):
                return "ok"
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
                return "ok"
        return None

    def draw(self):
        self.renderer.draw_overlay()
        self.renderer.draw_panel(self.rect)

        x = self.rect.left + DIALOG_PADDING
        y = self.rect.top + DIALOG_PADDING
        self.renderer.draw_text(self.title, (x, y), COLOR_TEXT_HIGHLIGHT, font_size="medium")
        y += self.renderer.font_medium.get_linesize() + DIALOG_PADDING // 2

        line_height = self.renderer.font_small.get_linesize()
        for line in self.lines:
            if y + line_height > self.ok_button.top:
                break
            self.renderer.draw_text(line, (x, y), COLOR_TEXT, font_size="small")
            y += line_height

        hovered = self.ok_button.collidepoint(pygame.mouse.get_pos())
        self.renderer.draw_button(self.ok_button, "OK", hovered)


class FeedbackDialog:
    """Multi-line feedback form with OK and Cancel buttons."""

    def __init__(self, renderer, title: str):
        self.renderer = renderer
        self.title = title

        width = int(WINDOW_WIDTH * 0.86)
        title_height = renderer.font_medium.get_linesize()
        area_height = renderer.font_medium.get_linesize() * FEEDBACK_AREA_ROWS + 8
        height = DIALOG_PADDING * 4 + title_height + area_height + BUTTON_HEIGHT

        self.rect = pygame.Rect(0, 0, width, height)
        self.rect.center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)

        self.text_area = TextField(
            pygame.Rect(
                self.rect.left + DIALOG_PADDING,
                self.rect.top + DIALOG_PADDING * 2 + title_height,
                width - 2 * DIALOG_PADDING,
                area_height
            ),
            multiline=True,
            focused=True
        )

        button_y = self.rect.bottom - DIALOG_PADDING - BUTTON_HEIGHT
        self.cancel_button = pygame.Rect(
            self.rect.right - DIALOG_PADDING - DIALOG_BUTTON_WIDTH,
            button_y, DIALOG_BUTTON_WIDTH, BUTTON_HEIGHT
        )
        self.ok_button = pygame.Rect(
            self.cancel_button.left - 10 - DIALOG_BUTTON_WIDTH,
            button_y, DIALOG_BUTTON_WIDTH, BUTTON_HEIGHT
        )

    @property
    def text(self) -> str:
        return self.text_area.text

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'ok' or 'cancel' when the form closes."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ok_button.collidepoint(event.pos):
                return "ok"
            if self.cancel_button.collidepoint(event.pos):
                return "cancel"
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "cancel"

        self.text_area.handle_event(event)
        return None

    def draw(self, cursor_visible: bool = True):
        self.renderer.draw_overlay()
        self.renderer.draw_panel(self.rect)
        self.renderer.draw_text(
            self.title,
            (self.rect.left + DIALOG_PADDING, self.rect.top + DIALOG_PADDING),
            COLOR_TEXT_HIGHLIGHT,
            font_size="medium"
        )
        self.text_area.draw(self.renderer, cursor_visible)

        mouse_pos = pygame.mouse.get_pos()
        self.renderer.draw_button(self.ok_button, "OK", self.ok_button.collidepoint(mouse_pos))
        self.renderer.draw_button(self.cancel_button, "Cancel", self.cancel_button.collidepoint(mouse_pos))
