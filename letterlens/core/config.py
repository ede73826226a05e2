"""Configuration management for LetterLens."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from multiprocessing import cpu_count
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from letterlens.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a word list analysis run."""

    # Word sources
    top_n: int | None = Field(None, ge=1, description="Top N most common English words")
    include: str | None = Field(None, description="Word list file (.json array or text)")
    all_words: bool = Field(False, description="Analyze the full english-words dictionary")

    # Output
    output: str | None = None
    format: Literal["json", "yaml"] = Field("json", description="Result file format")
    dump_words: str | None = Field(None, description="Plain-text dump of the word list")
    reports: str | None = None

    # Analysis
    pattern_limit: int = Field(Constants.PATTERN_LIMIT, ge=1)
    example_limit: int = Field(Constants.EXAMPLE_LIMIT, ge=1)

    verbose: bool = False
    debug: bool = False
    jobs: int = Field(default_factory=cpu_count, ge=1)

    @field_validator("include", "output", "dump_words", "reports", mode="before")
    @classmethod
    def expand_path(cls, v):
        """Expand ~ in path options."""
        if v is None or v == "":
            return None
        return expand_file_path(str(v))

    def has_word_source(self) -> bool:
        """Whether at least one word source is configured."""
        return bool(self.top_n or self.include or self.all_words)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
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
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "top_n": get_value("top_n", None),
        "include": get_value("include", None),
        "all_words": cli_args.all_words or json_config.get("all_words", False),
        "output": get_value("output", None),
        "format": get_value("format", "json"),
        "dump_words": get_value("dump_words", None),
        "reports": get_value("reports", None),
        "pattern_limit": get_value("pattern_limit", Constants.PATTERN_LIMIT),
        "example_limit": get_value("example_limit", Constants.EXAMPLE_LIMIT),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "jobs": get_value("jobs", cpu_count()),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
