"""Options menu bar and its drop-down."""

import pygame
from typing import Optional
from guessnumber.constants import (
    WINDOW_WIDTH, MENU_BAR_HEIGHT, MENU_ITEM_WIDTH, MENU_ITEM_HEIGHT,
    MENU_SEPARATOR_HEIGHT, COLOR_MENU_BAR, COLOR_MENU_ITEM_HOVER,
    COLOR_DIALOG, COLOR_DIALOG_BORDER, COLOR_TEXT, COLOR_FIELD_BORDER
)

MENU_TITLE = "Options"

# None marks a separator
MENU_ITEMS = [
    ("instructions", "How to Play"),
    ("feedback", "Send Feedback"),
    None,
    ("restart", "Restart Game"),
    ("exit", "Exit"),
]


class OptionsMenu:
    """Menu bar with a single "Options" drop-down."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.is_open = False

        self.bar_rect = pygame.Rect(0, 0, WINDOW_WIDTH, MENU_BAR_HEIGHT)
        title_width = renderer.font_small.size(MENU_TITLE)[0] + 24
        self.title_rect = pygame.Rect(0, 0, title_width, MENU_BAR_HEIGHT)

        self.items = []
        self.separators = []
        self._create_items()

        top = self.title_rect.bottom
        bottom = self.items[-1][1].bottom if self.items else top
        self.dropdown_rect = pygame.Rect(0, top, MENU_ITEM_WIDTH, bottom - top)

    def _create_items(self):
        """Lay out the drop-down entries below the menu title."""
        y = self.title_rect.bottom
        for entry in MENU_ITEMS:
            if entry is None:
                self.separators.append(y + MENU_SEPARATOR_HEIGHT // 2)
                y += MENU_SEPARATOR_HEIGHT
                continue
            action, label = entry
            rect = pygame.Rect(0, y, MENU_ITEM_WIDTH, MENU_ITEM_HEIGHT)
            self.items.append((action, rect, label))
            y += MENU_ITEM_HEIGHT

    def close(self):
        self.is_open = False

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """Handle input events. Returns the action of a clicked menu item."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.title_rect.collidepoint(event.pos):
                self.is_open = not self.is_open
                return None

            if self.is_open:
                self.is_open = False
                for action, rect, _ in self.items:
                    if rect.collidepoint(event.pos):
                        return action

        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.is_open = False

        return None

    def draw(self):
        """Draw the menu bar, and the drop-down when open."""
        screen = self.renderer.screen
        mouse_pos = pygame.mouse.get_pos()

        pygame.draw.rect(screen, COLOR_MENU_BAR, self.bar_rect)
        pygame.draw.line(
            screen, COLOR_FIELD_BORDER,
            (0, self.bar_rect.bottom - 1), (self.bar_rect.right, self.bar_rect.bottom - 1)
        )
        if self.is_open or self.title_rect.collidepoint(mouse_pos):
            pygame.draw.rect(screen, COLOR_MENU_ITEM_HOVER, self.title_rect)
        self.renderer.draw_text(MENU_TITLE, self.title_rect.center, COLOR_TEXT, font_size="small", center=True)

        if not self.is_open:
            return

        pygame.draw.rect(screen, COLOR_DIALOG, self.dropdown_rect)
        for _, rect, label in self.items:
            if rect.collidepoint(mouse_pos):
                pygame.draw.rect(screen, COLOR_MENU_ITEM_HOVER, rect)
            self.renderer.draw_text(label, (rect.left + 12, rect.top + 6), COLOR_TEXT, font_size="small")
        for y in self.separators:
            pygame.draw.line(screen, COLOR_FIELD_BORDER, (6, y), (self.dropdown_rect.right - 6, y))
        pygame.draw.rect(screen, COLOR_DIALOG_BORDER, self.dropdown_rect, 1)
