"""Command-line interface for wordle_guesses."""

import argparse

from wordle_guesses.cli.usage import SHORT_USAGE
from wordle_guesses.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog=Constants.PROGRAM_NAME,
        usage=SHORT_USAGE,
        description="Print candidate Wordle guesses for a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Every letter in the third position, 5 per line
  %(prog)s _a{Constants.CHANGE_CHAR}am

  # Skip letters already ruled out
  %(prog)s -e risengycuk {Constants.CHANGE_CHAR}a_am

  # Only try a handful of letters
  %(prog)s -i xyz cr{Constants.CHANGE_CHAR}mp

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{{
  "template": "_a.am",
  "excluded": "risengycuk",
  "columns": 5,
  "output": "guesses.txt"
}}
        """,
    )

    parser.add_argument(
        "template",
        nargs="?",
        help=(
            f"{Constants.TEMPLATE_LENGTH}-character sequence of letters, any number of "
            f"'{Constants.BLANK_CHAR}' and a single '{Constants.CHANGE_CHAR}'"
        ),
    )

    # Letter selection
    letters = parser.add_mutually_exclusive_group()
    letters.add_argument(
        "-e",
        "--exclude",
        dest="excluded",
        type=str,
        default="",
        metavar="excluded_letters",
        help="specify list of letters to exclude when generating candidate guesses",
    )
    letters.add_argument(
        "-i",
        "--include",
        dest="included",
        type=str,
        default="",
        metavar="included_letters",
        help="specify explicit list of letters to include when generating candidate guesses",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("-o", "--output", type=str, help="Write candidates to this file")
    parser.add_argument(
        "--columns",
        dest="columns",
        type=int,
        default=Constants.GUESSES_PER_LINE,
        help=f"Candidates per line (default: {Constants.GUESSES_PER_LINE})",
    )
    parser.add_argument(
        "--length",
        dest="template_length",
        type=int,
        default=Constants.TEMPLATE_LENGTH,
        help=f"Template length (default: {Constants.TEMPLATE_LENGTH})",
    )

    # Flags
    parser.add_argument(
        "-d", "--describe", action="store_true", help="print out a long description and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser
