"""wordle_guesses - candidate guess lists for Wordle templates.

Substitute every admissible letter into the single change position of a
template and print the resulting candidates.
"""

from wordle_guesses.core import Config, GuessError, LetterSet, Template, load_config
from wordle_guesses.processing import generate_candidates, run_pipeline
from wordle_guesses.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "GuessError",
    "LetterSet",
    "Template",
    "generate_candidates",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
