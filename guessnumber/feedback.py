"""Append-only feedback log."""

import logging
import os
from typing import Union

from guessnumber.constants import FEEDBACK_FILE

logger = logging.getLogger(__name__)


class FeedbackWriteError(Exception):
    """Raised when feedback could not be appended to the log file."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"Could not write feedback to {path}: {cause}")
        self.path = path
        self.cause = cause


def append_feedback(text: str, path: Union[str, os.PathLike] = FEEDBACK_FILE):
    """Append one feedback entry, newline-terminated, creating the file if needed."""
    try:
        with open(path, "a", encoding="utf-8") as log_file:
            log_file.write(text + "\n")
    except OSError as exc:
        raise FeedbackWriteError(path, exc) from exc
    logger.info("Saved %d characters of feedback to %s", len(text), path)
