"""Output formatting for candidate guesses."""

from wordle_guesses.output.formatting import format_grid, save_grid, write_grid

__all__ = ["format_grid", "save_grid", "write_grid"]
