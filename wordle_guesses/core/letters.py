"""Letter sets and working alphabet resolution.

Letter sets are 26-bit bitsets over A-Z. Bit ``i`` stands for the letter
``chr(ord("A") + i)``, so iterating bits from low to high yields letters in
alphabetical order.
"""

from dataclasses import dataclass
from string import ascii_uppercase
from typing import Iterator

from wordle_guesses.core.errors import InternalInvariantViolation, InvalidLetters

_ALL_BITS = (1 << len(ascii_uppercase)) - 1


@dataclass(frozen=True)
class LetterSet:
    """Immutable set of uppercase letters A-Z."""

    bits: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or self.bits & ~_ALL_BITS or self.bits < 0:
            raise InternalInvariantViolation(
                f"letter set bits {self.bits!r} fall outside the range A-Z"
            )

    @classmethod
    def from_letters(cls, letters: str) -> "LetterSet":
        """Build a set from a free-form string of letters.

        Letters are case-insensitive and duplicates collapse. Whitespace is
        skipped, any other non-letter is rejected.

        Raises:
            InvalidLetters: If ``letters`` contains characters outside A-Z
        """
        bits = 0
        invalid = []
        for char in letters.upper():
            if char.isspace():
                continue
            index = ascii_uppercase.find(char)
            if index < 0:
                invalid.append(char)
                continue
            bits |= 1 << index

        if invalid:
            raise InvalidLetters(letters, "".join(invalid))
        return cls(bits)

    def __iter__(self) -> Iterator[str]:
        for index, letter in enumerate(ascii_uppercase):
            if self.bits >> index & 1:
                yield letter

    def __len__(self) -> int:
        return self.bits.bit_count()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __contains__(self, letter: object) -> bool:
        if not isinstance(letter, str) or len(letter) != 1:
            return False
        index = ascii_uppercase.find(letter)
        return index >= 0 and bool(self.bits >> index & 1)

    def __sub__(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self.bits & ~other.bits)

    def __str__(self) -> str:
        return "".join(self)


FULL_ALPHABET = LetterSet(_ALL_BITS)


def resolve_working_alphabet(included_letters: str = "", excluded_letters: str = "") -> LetterSet:
    """Resolve the letters to substitute into the change position.

    A non-empty inclusion set wins outright; otherwise the full alphabet minus
    the exclusion set is used. Callers must not pass both arguments non-empty.

    Args:
        included_letters: Letters to use, any case
        excluded_letters: Letters to leave out, any case

    Returns:
        The working alphabet
    """
    included = LetterSet.from_letters(included_letters)
    excluded = LetterSet.from_letters(excluded_letters)

    if included:
        return included
    return FULL_ALPHABET - excluded
