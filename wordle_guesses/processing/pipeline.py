"""Candidate generation pipeline orchestration."""

import time
from typing import TextIO

from loguru import logger

from wordle_guesses.core import (
    Config,
    list_candidates,
    normalize_all,
    parse_template,
    resolve_working_alphabet,
)
from wordle_guesses.output import write_grid
from wordle_guesses.utils import Constants


def generate_candidates(
    template: str,
    included_letters: str = "",
    excluded_letters: str = "",
    *,
    length: int = Constants.TEMPLATE_LENGTH,
    blank: str = Constants.BLANK_CHAR,
    change: str = Constants.CHANGE_CHAR,
) -> list[str]:
    """Generate display-cased candidate guesses for a template.

    ``included_letters`` and ``excluded_letters`` must not both be non-empty;
    that is checked by the caller (see ``Config``), not here.

    Args:
        template: Template with one change marker, e.g. "_a.am"
        included_letters: Letters to substitute instead of the full alphabet
        excluded_letters: Letters to drop from the full alphabet
        length: Required template length
        blank: Blank marker character
        change: Change marker character

    Returns:
        Candidates ordered by substituted letter, possibly empty

    Raises:
        InvalidTemplateLength: Template has the wrong length
        InvalidMarkerCount: Template does not have exactly one change marker
        InvalidLetters: A letter argument contains non-alphabetic characters
    """
    parsed = parse_template(template, length=length, blank=blank, change=change)
    logger.debug(
        f"Template '{template}': prefix='{parsed.prefix}' suffix='{parsed.suffix}' "
        f"(change position {parsed.change_index + 1} of {parsed.length})"
    )

    alphabet = resolve_working_alphabet(included_letters, excluded_letters)
    logger.debug(f"Working alphabet: {alphabet or '(empty)'} ({len(alphabet)} letters)")

    return normalize_all(list_candidates(parsed, alphabet), blank)


def run_pipeline(config: Config, stream: TextIO | None = None) -> list[str]:
    """Generate candidates for ``config`` and write them out.

    Nothing is written unless generation succeeds.
    """
    if not config.template:
        raise ValueError("no template given")

    start_time = time.time()
    logger.info(f"Template: {config.template}")
    if config.included:
        logger.info(f"Included letters: {config.included}")
    if config.excluded:
        logger.info(f"Excluded letters: {config.excluded}")

    candidates = generate_candidates(
        config.template,
        config.included,
        config.excluded,
        length=config.template_length,
        blank=config.blank_char,
        change=config.change_char,
    )
    logger.info(f"Generated {len(candidates)} candidates in {time.time() - start_time:.3f}s")

    write_grid(candidates, config.columns, output_path=config.output, stream=stream)
    return candidates
