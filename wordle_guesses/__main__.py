"""Main entry point for the wordle_guesses package."""

import sys

from loguru import logger

from wordle_guesses.cli import create_parser, long_description
from wordle_guesses.cli.usage import SHORT_USAGE
from wordle_guesses.core import GuessError, load_config
from wordle_guesses.processing import run_pipeline
from wordle_guesses.utils import setup_logger


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print(long_description(), file=sys.stderr)
        return 0

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.describe:
        print(long_description(), file=sys.stderr)
        return 0

    try:
        config = load_config(args.config, args, parser)
    except (OSError, ValueError):
        return 1

    setup_logger(verbose=config.verbose, debug=config.debug)

    if not config.template:
        print(f"usage: {SHORT_USAGE}", file=sys.stderr)
        return 1

    try:
        run_pipeline(config)
    except GuessError as e:
        logger.error(f"✗ {e}")
        return 1
    except OSError:
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
