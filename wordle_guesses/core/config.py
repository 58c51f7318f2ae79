"""Configuration management for wordle_guesses."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from wordle_guesses.core.errors import ConflictingInclusionExclusion
from wordle_guesses.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for one candidate generation run."""

    template: str | None = Field(None, description="Template such as '_a.am'")
    included: str = Field("", description="Letters to substitute (overrides the alphabet)")
    excluded: str = Field("", description="Letters to leave out of the alphabet")
    template_length: int = Field(
        Constants.TEMPLATE_LENGTH, ge=Constants.MIN_TEMPLATE_LENGTH, description="Template length"
    )
    columns: int = Field(Constants.GUESSES_PER_LINE, ge=1, description="Candidates per line")
    blank_char: str = Field(Constants.BLANK_CHAR, min_length=1, max_length=1)
    change_char: str = Field(Constants.CHANGE_CHAR, min_length=1, max_length=1)
    output: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("included", "excluded", mode="before")
    @classmethod
    def parse_letters(cls, v):
        """Uppercase letter strings, treating None as empty."""
        if v is None:
            return ""
        if isinstance(v, list):
            return "".join(str(s) for s in v).upper()
        return str(v).upper()

    @field_validator("blank_char", "change_char")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Markers must not be letters."""
        if v.isalpha():
            raise ValueError(f"marker '{v}' must not be a letter")
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.blank_char == self.change_char:
            raise ValueError(
                f"blank_char and change_char must differ, both are '{self.blank_char}'"
            )
        if self.included.strip() and self.excluded.strip():
            raise ConflictingInclusionExclusion()
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise

    config_dict = {
        "template": get_value("template", None),
        "included": get_value("included", ""),
        "excluded": get_value("excluded", ""),
        "template_length": get_value("template_length", Constants.TEMPLATE_LENGTH),
        "columns": get_value("columns", Constants.GUESSES_PER_LINE),
        "blank_char": json_config.get("blank_char", Constants.BLANK_CHAR),
        "change_char": json_config.get("change_char", Constants.CHANGE_CHAR),
        "output": get_value("output", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
