"""Editable text boxes built on pygame text-input events."""

import pygame
from typing import Optional, List


class TextField:
    """Single- or multi-line text box.

    Typed characters arrive as TEXTINPUT events; editing keys as KEYDOWN.
    In a single-line field Enter is reported as a "submit" action, in a
    multi-line field it inserts a newline.
    """

    def __init__(self, rect: pygame.Rect, multiline: bool = False, focused: bool = False):
        self.rect = rect
        self.multiline = multiline
        self.focused = focused
        self.text = ""

    def clear(self):
        self.text = ""

    def lines(self) -> List[str]:
        return self.text.split("\n")

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns 'submit' when Enter confirms a single-line field."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return None

        if not self.focused:
            return None

        if event.type == pygame.TEXTINPUT:
            typed = event.text
            if not self.multiline:
                typed = typed.replace("\n", "").replace("\r", "")
            self.text += typed

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if not self.multiline:
                    return "submit"
                self.text += "\n"

        return None

    def draw(self, renderer, cursor_visible: bool = True):
        renderer.draw_text_field(
            self.rect,
            self.lines(),
            focused=self.focused,
            show_cursor=self.focused and cursor_visible
        )
