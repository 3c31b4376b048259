"""
Pytest configuration and fixtures
"""
import os

# Headless SDL so the window tests run without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from guessnumber.game_state import Game
from guessnumber.session import GameSession


@pytest.fixture
def session() -> GameSession:
    """Session with the target fixed at 50"""
    return GameSession(target=50)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240917)


@pytest.fixture
def feedback_path(tmp_path):
    return tmp_path / "feedback.txt"


@pytest.fixture
def game(session, feedback_path):
    """Headless game window around the fixed-target session"""
    game = Game(session=session, feedback_path=feedback_path)
    yield game
    pygame.quit()
