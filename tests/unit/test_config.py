"""Unit tests for configuration loading and validation.

Each test has exactly one assertion.
"""

import json

import pytest
from pydantic import ValidationError

from wordle_guesses.cli import create_parser
from wordle_guesses.core import Config, load_config


class TestConfig:
    """Test Config model validation."""

    def test_defaults_to_five_columns(self) -> None:
        """Grid defaults to five candidates per line."""
        assert Config().columns == 5

    def test_uppercases_letters(self) -> None:
        """Letter strings are normalised to uppercase."""
        assert Config(excluded="risen").excluded == "RISEN"

    def test_none_letters_become_empty(self) -> None:
        """None is treated as no letters."""
        assert Config(included=None).included == ""

    def test_list_letters_are_joined(self) -> None:
        """JSON arrays of letters are accepted."""
        assert Config(included=["x", "y"]).included == "XY"

    def test_rejects_both_included_and_excluded(self) -> None:
        """Inclusion and exclusion are mutually exclusive."""
        with pytest.raises(ValidationError):
            Config(included="ab", excluded="cd")

    def test_rejects_identical_markers(self) -> None:
        """Blank and change markers must differ."""
        with pytest.raises(ValidationError):
            Config(blank_char="*", change_char="*")

    def test_rejects_letter_marker(self) -> None:
        """Markers cannot be letters."""
        with pytest.raises(ValidationError):
            Config(change_char="x")

    def test_rejects_template_length_below_two(self) -> None:
        """Templates need at least two positions."""
        with pytest.raises(ValidationError):
            Config(template_length=1)


class TestLoadConfig:
    """Test merging of JSON configuration with CLI arguments."""

    def test_reads_template_from_cli(self) -> None:
        """Positional template ends up in the config."""
        parser = create_parser()
        args = parser.parse_args(["_a.am"])
        assert load_config(None, args, parser).template == "_a.am"

    def test_reads_values_from_json(self, tmp_path) -> None:
        """JSON values are used when the CLI leaves them at defaults."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"template": ".a_am", "excluded": "risen"}))
        parser = create_parser()
        args = parser.parse_args(["--config", str(config_file)])
        assert load_config(args.config, args, parser).excluded == "RISEN"

    def test_cli_overrides_json(self, tmp_path) -> None:
        """Explicit CLI values win over JSON values."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"template": ".a_am", "columns": 3}))
        parser = create_parser()
        args = parser.parse_args(["--config", str(config_file), "--columns", "2"])
        assert load_config(args.config, args, parser).columns == 2

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """Malformed JSON is reported as a ValueError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        parser = create_parser()
        args = parser.parse_args(["--config", str(config_file)])
        with pytest.raises(ValueError):
            load_config(args.config, args, parser)

    def test_missing_file_raises(self, tmp_path) -> None:
        """Missing config file propagates FileNotFoundError."""
        parser = create_parser()
        args = parser.parse_args(["--config", str(tmp_path / "missing.json")])
        with pytest.raises(FileNotFoundError):
            load_config(args.config, args, parser)

    def test_conflict_between_cli_and_json_raises(self, tmp_path) -> None:
        """CLI inclusion plus JSON exclusion is rejected."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"template": ".a_am", "excluded": "risen"}))
        parser = create_parser()
        args = parser.parse_args(["--config", str(config_file), "-i", "xyz"])
        with pytest.raises(ValueError):
            load_config(args.config, args, parser)
