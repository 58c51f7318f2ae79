"""Candidate generation and display casing."""

from typing import Iterable

from wordle_guesses.core.letters import LetterSet
from wordle_guesses.core.template import Template
from wordle_guesses.utils.constants import Constants


def list_candidates(template: Template, alphabet: LetterSet) -> list[str]:
    """Substitute each letter of ``alphabet`` into the template.

    Candidates come out in ascending letter order, one per letter.
    """
    return [template.substitute(letter) for letter in alphabet]


def normalize_case(candidate: str, blank: str = Constants.BLANK_CHAR) -> str:
    """Lowercase a candidate and capitalize its first character.

    A leading blank marker is left alone so undetermined positions stay
    visually distinct from letters.
    """
    lowered = candidate.lower()
    if not lowered or lowered[0] == blank:
        return lowered
    return lowered[0].upper() + lowered[1:]


def normalize_all(candidates: Iterable[str], blank: str = Constants.BLANK_CHAR) -> list[str]:
    return [normalize_case(candidate, blank) for candidate in candidates]
