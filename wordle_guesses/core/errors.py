"""Exceptions raised while building candidate guesses."""


class GuessError(ValueError):
    """Base class for all candidate generation errors."""


class InvalidTemplateLength(GuessError):
    """Template does not have the required number of characters."""

    def __init__(self, template: str, expected: int) -> None:
        self.template = template
        self.expected = expected
        super().__init__(
            f"template '{template}' has {len(template)} characters, expected {expected}"
        )


class InvalidMarkerCount(GuessError):
    """Template does not contain exactly one change marker."""

    def __init__(self, template: str, marker: str, count: int) -> None:
        self.template = template
        self.marker = marker
        self.count = count
        super().__init__(
            f"template '{template}' must have one (and only one) '{marker}' character, "
            f"found {count}"
        )


class InvalidLetters(GuessError):
    """Letter argument contains characters outside A-Z."""

    def __init__(self, letters: str, invalid: str) -> None:
        self.letters = letters
        self.invalid = invalid
        super().__init__(f"letters '{letters}' contain non-alphabetic characters: {invalid!r}")


class ConflictingInclusionExclusion(GuessError):
    """Both included and excluded letters were given."""

    def __init__(self) -> None:
        super().__init__("cannot specify both included and excluded letters")


class InternalInvariantViolation(GuessError):
    """A letter set holds a value that is not a valid letter."""


class InvalidTemplateCharacters(GuessError):
    """Template contains characters other than A-Z and the two markers."""

    def __init__(self, template: str, invalid: str) -> None:
        self.template = template
        self.invalid = invalid
        super().__init__(f"template '{template}' contains invalid characters: {invalid!r}")
