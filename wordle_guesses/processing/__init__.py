"""Processing pipeline for wordle_guesses."""

from wordle_guesses.processing.pipeline import generate_candidates, run_pipeline

__all__ = ["generate_candidates", "run_pipeline"]
