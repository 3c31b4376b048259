#!/usr/bin/env python3
"""
Guess the Number - a small desktop guessing game

Guess a secret number between 1 and 100. Each guess tells you whether
you are too high or too low, and the score counts your attempts.
"""

import logging
import sys

from guessnumber.game_state import Game


def main():
    """Entry point for the game."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    game = Game()
    sys.exit(game.run())


if __name__ == "__main__":
    main()
