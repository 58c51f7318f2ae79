"""Core domain logic for wordle_guesses."""

from .candidates import list_candidates, normalize_all, normalize_case
from .config import Config, load_config
from .errors import (
    ConflictingInclusionExclusion,
    GuessError,
    InternalInvariantViolation,
    InvalidLetters,
    InvalidMarkerCount,
    InvalidTemplateCharacters,
    InvalidTemplateLength,
)
from .letters import FULL_ALPHABET, LetterSet, resolve_working_alphabet
from .template import Template, parse_template

__all__ = [
    "FULL_ALPHABET",
    "Config",
    "ConflictingInclusionExclusion",
    "GuessError",
    "InternalInvariantViolation",
    "InvalidLetters",
    "InvalidMarkerCount",
    "InvalidTemplateCharacters",
    "InvalidTemplateLength",
    "LetterSet",
    "Template",
    "list_candidates",
    "load_config",
    "normalize_all",
    "normalize_case",
    "parse_template",
    "resolve_working_alphabet",
]
