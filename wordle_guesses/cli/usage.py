"""Long description text for the command-line interface."""

import textwrap

from wordle_guesses.utils import Constants

_BLANK = Constants.BLANK_CHAR
_CHANGE = Constants.CHANGE_CHAR

SHORT_USAGE = (
    f"{Constants.PROGRAM_NAME} [-h] [-d] [-e excluded_letters | -i included_letters] template"
)

_PARAGRAPHS = (
    "When playing Wordle, sometimes it can be helpful to write out a list of "
    "candidate guesses. For example, you might be considering all the "
    "possibilities that arise from changing the third character in the sequence "
    "'_A?AM'. Assuming through previous play you've already ruled out 'R', 'I', "
    "'S', 'E', 'N', 'G', 'Y', 'C', 'U', and 'K', you would end up generating this "
    "list (assuming you are being exhaustive and not skipping improbable "
    "candidates): _AAAM, _ABAM, _ADAM, _AFAM, _AHAM, _AJAM, _ALAM, _AMAM, _AOAM, "
    "_APAM, _AQAM, _ATAM, _AVAM, _AWAM, _AXAM, and _AZAM.",
    "Writing lists like these out can be quite laborious, and can create a "
    "significant hindrance to those with diminished dexterity. "
    f"{Constants.PROGRAM_NAME} alleviates this burden by printing out candidate "
    "Wordle guesses. You specify the pattern for the candidate guesses using a "
    f"{Constants.TEMPLATE_LENGTH}-letter template composed of alphabetical letters, "
    f"any number of the character '{_BLANK}', and a single occurrence of the "
    f"character '{_CHANGE}'. The '{_CHANGE}' character indicates the letter to be "
    f"changed to generate the candidate guesses. ('{_CHANGE}' is used instead of "
    "'?' to avoid issues with command-line processors that try to perform "
    "substitution using '?'.)",
    "The program will iterate through the alphabet, substituting the "
    f"'{_CHANGE}' with candidate letters to generate a guess. You can specify a "
    "list of letters to exclude when generating the candidate guesses; typically, "
    "you would do this for the letters which Wordle has indicated aren't in the "
    "answer. Alternatively, instead of iterating through the alphabet, you can "
    "specify the set of letters to include when making guesses.",
)

_TEMPLATE_ARGUMENT = (
    f"template is a {Constants.TEMPLATE_LENGTH}-character sequence composed of letters, "
    f"any number of the character '{_BLANK}', and a single instance of the character "
    f"'{_CHANGE}' ('{_BLANK}a{_CHANGE}am', for example)."
)

_OPTIONS = (
    ("-e excluded_letters", "specify list of letters to exclude when generating candidate guesses"),
    (
        "-i included_letters",
        "specify explicit list of letters to include when generating candidate guesses",
    ),
    ("-h", "show a short usage message and exit"),
    ("-d", "print out this description and exit"),
)


def long_description(width: int = Constants.USAGE_WRAP_WIDTH) -> str:
    """Build the long description shown with -d or when run without arguments."""
    lines = [f"usage: {SHORT_USAGE}", ""]
    for paragraph in _PARAGRAPHS:
        lines.append(textwrap.fill(paragraph, width=width))
        lines.append("")

    lines.append("positional arguments:")
    lines.append("  template")
    lines.append(
        textwrap.fill(
            _TEMPLATE_ARGUMENT, width=width, initial_indent="\t\t", subsequent_indent="\t\t"
        )
    )
    lines.append("")

    lines.append("optional arguments:")
    for flag, text in _OPTIONS:
        lines.append(f"  {flag}")
        lines.append(f"\t\t{text}")

    return "\n".join(lines)
