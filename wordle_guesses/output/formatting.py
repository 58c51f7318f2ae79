"""Grid layout and writing of candidate guesses."""

from pathlib import Path
import sys
from typing import Sequence, TextIO

from loguru import logger

from wordle_guesses.utils import Constants, expand_file_path


def format_grid(candidates: Sequence[str], columns: int = Constants.GUESSES_PER_LINE) -> str:
    """Arrange candidates in rows of ``columns``, tab separated.

    Every row ends with a newline. The last row may be short and is not
    padded. An empty sequence gives an empty string.
    """
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")

    rows = [
        Constants.COLUMN_SEPARATOR.join(candidates[start : start + columns])
        for start in range(0, len(candidates), columns)
    ]
    return "".join(f"{row}\n" for row in rows)


def save_grid(grid: str, output_path: str) -> Path:
    """Write a formatted grid to ``output_path``, creating parent directories.

    Raises:
        OSError: If the directory or file cannot be written
    """
    path = Path(expand_file_path(output_path) or output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(grid, encoding="utf-8")
    except PermissionError:
        logger.error(f"✗ Permission denied writing candidates: {path}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error writing candidates to {path}: {e}")
        raise
    return path


def write_grid(
    candidates: Sequence[str],
    columns: int = Constants.GUESSES_PER_LINE,
    output_path: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the candidate grid to a file, or to ``stream`` (stdout by default)."""
    grid = format_grid(candidates, columns)

    if output_path:
        path = save_grid(grid, output_path)
        logger.info(f"✓ Wrote {len(candidates)} candidates to {path}")
        return

    target = stream if stream is not None else sys.stdout
    target.write(grid)
    target.flush()
