"""Shared utility functions for wordle_guesses."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ``~`` in a user-supplied path, passing None through."""
    if not filepath:
        return None
    return os.path.expanduser(filepath)
