"""Command-line interface for wordle_guesses."""

from wordle_guesses.cli.parser import create_parser
from wordle_guesses.cli.usage import long_description

__all__ = ["create_parser", "long_description"]
