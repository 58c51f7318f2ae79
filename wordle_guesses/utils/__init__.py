"""Utility functions for wordle_guesses."""

from wordle_guesses.utils.constants import Constants
from wordle_guesses.utils.helpers import expand_file_path
from wordle_guesses.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "setup_logger",
]
