"""Constants shared across wordle_guesses."""


class Constants:
    """Fixed values for templates, markers and output layout."""

    PROGRAM_NAME = "wordle_guesses"

    # Templates
    TEMPLATE_LENGTH = 5
    MIN_TEMPLATE_LENGTH = 2
    BLANK_CHAR = "_"
    CHANGE_CHAR = "."

    # Output grid
    GUESSES_PER_LINE = 5
    COLUMN_SEPARATOR = "\t"

    # Long description
    USAGE_WRAP_WIDTH = 70
