"""Template parsing.

A template is a fixed-length pattern made of letters, any number of blank
markers and exactly one change marker. Parsing splits it around the change
marker into an uppercased prefix and suffix.
"""

from dataclasses import dataclass
from string import ascii_letters

from wordle_guesses.core.errors import (
    InvalidMarkerCount,
    InvalidTemplateCharacters,
    InvalidTemplateLength,
)
from wordle_guesses.utils.constants import Constants


@dataclass(frozen=True)
class Template:
    """Template split around its change position."""

    prefix: str
    suffix: str

    @property
    def length(self) -> int:
        """Total template length, including the change position."""
        return len(self.prefix) + 1 + len(self.suffix)

    @property
    def change_index(self) -> int:
        return len(self.prefix)

    def substitute(self, letter: str) -> str:
        """Build the candidate with ``letter`` in the change position."""
        return f"{self.prefix}{letter}{self.suffix}"


def parse_template(
    raw: str,
    length: int = Constants.TEMPLATE_LENGTH,
    blank: str = Constants.BLANK_CHAR,
    change: str = Constants.CHANGE_CHAR,
) -> Template:
    """Validate a raw template and split it around the change marker.

    Blank markers are not counted; they pass through to the candidates as
    literal characters.

    Args:
        raw: Template as given by the user, e.g. "_a.am"
        length: Required template length
        blank: Blank marker character
        change: Change marker character

    Returns:
        Template with uppercased prefix and suffix

    Raises:
        InvalidTemplateLength: If ``raw`` is not ``length`` characters long
        InvalidMarkerCount: If ``change`` does not occur exactly once
        InvalidTemplateCharacters: If ``raw`` holds anything but A-Z and the markers
    """
    if blank == change:
        raise ValueError(f"blank and change markers must differ, both are '{blank}'")
    if len(raw) != length:
        raise InvalidTemplateLength(raw, length)

    count = raw.count(change)
    if count != 1:
        raise InvalidMarkerCount(raw, change, count)

    allowed = set(ascii_letters) | {blank, change}
    invalid = "".join(char for char in raw if char not in allowed)
    if invalid:
        raise InvalidTemplateCharacters(raw, invalid)

    prefix, suffix = raw.split(change)
    return Template(prefix=prefix.upper(), suffix=suffix.upper())
