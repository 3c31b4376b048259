"""Main rendering logic for the game."""

import pygame
from typing import Tuple, List
from guessnumber.constants import (
    COLOR_BACKGROUND, COLOR_TEXT, COLOR_BUTTON, COLOR_BUTTON_HOVER,
    COLOR_BUTTON_TEXT, COLOR_FIELD, COLOR_FIELD_BORDER, COLOR_FIELD_FOCUS,
    COLOR_DIALOG, COLOR_DIALOG_BORDER, COLOR_OVERLAY
)


class Renderer:
    """Handles all rendering for the game."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font_large = pygame.font.Font(None, 30)
        self.font_medium = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)

    def get_font(self, font_size: str = "medium") -> pygame.font.Font:
        if font_size == "large":
            return self.font_large
        elif font_size == "small":
            return self.font_small
        return self.font_medium

    def clear(self):
        """Clear the screen with background color."""
        self.screen.fill(COLOR_BACKGROUND)

    def draw_text(
        self,
        text: str,
        position: Tuple[float, float],
        color: Tuple[int, int, int] = COLOR_TEXT,
        font_size: str = "medium",
        center: bool = False
    ):
        """Draw text on the screen."""
        font = self.get_font(font_size)
        text_surface = font.render(text, True, color)

        if center:
            rect = text_surface.get_rect(center=position)
            self.screen.blit(text_surface, rect)
        else:
            self.screen.blit(text_surface, position)

    def wrap_text(self, text: str, max_width: int, font_size: str = "small") -> List[str]:
        """Split text into lines no wider than max_width, keeping explicit newlines."""
        font = self.get_font(font_size)
        lines = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if current and font.size(candidate)[0] > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def draw_button(
        self,
        rect: pygame.Rect,
        text: str,
        hovered: bool = False,
        color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None
    ):
        """Draw a button."""
        if color is None:
            color = COLOR_BUTTON
        if hover_color is None:
            hover_color = COLOR_BUTTON_HOVER

        current_color = hover_color if hovered else color

        # Background, then a lighter border
        pygame.draw.rect(self.screen, current_color, rect, border_radius=6)
        border_color = tuple(min(255, c + 30) for c in current_color)
        pygame.draw.rect(self.screen, border_color, rect, 2, border_radius=6)

        text_surface = self.font_medium.render(text, True, COLOR_BUTTON_TEXT)
        text_rect = text_surface.get_rect(center=rect.center)
        self.screen.blit(text_surface, text_rect)

    def draw_text_field(
        self,
        rect: pygame.Rect,
        lines: List[str],
        focused: bool = False,
        show_cursor: bool = False
    ):
        """Draw a text box with its contents clipped to the box."""
        pygame.draw.rect(self.screen, COLOR_FIELD, rect, border_radius=4)
        border_color = COLOR_FIELD_FOCUS if focused else COLOR_FIELD_BORDER
        pygame.draw.rect(self.screen, border_color, rect, 2, border_radius=4)

        font = self.font_medium
        line_height = font.get_linesize()
        inner = rect.inflate(-12, -8)
        previous_clip = self.screen.get_clip()
        self.screen.set_clip(inner)

        # Keep the last lines visible when the text overflows
        visible = max(1, inner.height // line_height)
        shown = lines[-visible:] if lines else [""]
        y = inner.top if len(shown) > 1 else inner.centery - line_height // 2
        for line in shown:
            surface = font.render(line, True, COLOR_TEXT)
            self.screen.blit(surface, (inner.left, y))
            y += line_height

        if show_cursor:
            last = shown[-1]
            cursor_x = inner.left + font.size(last)[0] + 1
            cursor_y = y - line_height
            pygame.draw.line(
                self.screen, COLOR_TEXT,
                (cursor_x, cursor_y + 2), (cursor_x, cursor_y + line_height - 2),
                1
            )

        self.screen.set_clip(previous_clip)

    def draw_overlay(self):
        """Dim everything drawn so far, for modal dialogs."""
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def draw_panel(self, rect: pygame.Rect):
        """Draw a bordered dialog panel."""
        pygame.draw.rect(self.screen, COLOR_DIALOG, rect, border_radius=8)
        pygame.draw.rect(self.screen, COLOR_DIALOG_BORDER, rect, 2, border_radius=8)
