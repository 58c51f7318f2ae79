"""Unit tests for letter sets and working alphabet resolution.

Each test has exactly one assertion.
"""

from string import ascii_uppercase

import pytest

from wordle_guesses.core import (
    FULL_ALPHABET,
    InternalInvariantViolation,
    InvalidLetters,
    LetterSet,
    resolve_working_alphabet,
)


class TestLetterSet:
    """Test letter set construction and set operations."""

    def test_full_alphabet_has_26_letters(self) -> None:
        """Full alphabet holds every letter A-Z."""
        assert len(FULL_ALPHABET) == 26

    def test_full_alphabet_iterates_in_order(self) -> None:
        """Full alphabet iterates A through Z."""
        assert "".join(FULL_ALPHABET) == ascii_uppercase

    def test_uppercases_input(self) -> None:
        """Lowercase input yields uppercase members."""
        assert list(LetterSet.from_letters("xyz")) == ["X", "Y", "Z"]

    def test_collapses_duplicates(self) -> None:
        """Repeated letters count once."""
        assert len(LetterSet.from_letters("aAaB")) == 2

    def test_iterates_sorted_regardless_of_input_order(self) -> None:
        """Members come out in alphabetical order."""
        assert str(LetterSet.from_letters("zma")) == "AMZ"

    def test_skips_whitespace(self) -> None:
        """Whitespace between letters is ignored."""
        assert str(LetterSet.from_letters("r i s")) == "IRS"

    def test_rejects_digits(self) -> None:
        """Digits are not letters."""
        with pytest.raises(InvalidLetters):
            LetterSet.from_letters("ab1")

    def test_rejects_marker_characters(self) -> None:
        """Marker characters are not letters."""
        with pytest.raises(InvalidLetters):
            LetterSet.from_letters("a_.")

    def test_empty_string_is_empty_set(self) -> None:
        """Empty input gives a falsy set."""
        assert not LetterSet.from_letters("")

    def test_contains_member(self) -> None:
        """Membership test finds included letters."""
        assert "Q" in LetterSet.from_letters("q")

    def test_does_not_contain_lowercase(self) -> None:
        """Members are stored uppercase only."""
        assert "q" not in LetterSet.from_letters("q")

    def test_difference_removes_letters(self) -> None:
        """Subtraction drops the other set's members."""
        assert str(LetterSet.from_letters("abc") - LetterSet.from_letters("b")) == "AC"

    def test_rejects_bits_outside_alphabet(self) -> None:
        """Bits above Z violate the letter set invariant."""
        with pytest.raises(InternalInvariantViolation):
            LetterSet(1 << 26)

    def test_rejects_negative_bits(self) -> None:
        """Negative bit patterns violate the letter set invariant."""
        with pytest.raises(InternalInvariantViolation):
            LetterSet(-1)


class TestResolveWorkingAlphabet:
    """Test inclusion/exclusion resolution."""

    def test_no_filters_gives_full_alphabet(self) -> None:
        """Without filters every letter is used."""
        assert resolve_working_alphabet("", "") == FULL_ALPHABET

    def test_exclusion_is_set_difference(self) -> None:
        """Excluded letters are removed from the alphabet."""
        expected = set(ascii_uppercase) - set("RISENGYCUK")
        assert set(resolve_working_alphabet("", "risengycuk")) == expected

    def test_inclusion_overrides_alphabet(self) -> None:
        """Included letters are exactly the working alphabet."""
        assert str(resolve_working_alphabet("xyzx", "")) == "XYZ"

    def test_inclusion_wins_over_exclusion(self) -> None:
        """A non-empty inclusion set ignores the exclusion set."""
        assert str(resolve_working_alphabet("ab", "a")) == "AB"

    def test_excluding_everything_gives_empty_alphabet(self) -> None:
        """Excluding all 26 letters leaves nothing."""
        assert not resolve_working_alphabet("", ascii_uppercase)
