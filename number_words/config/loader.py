# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: YAML on disk in, frozen NumberWordsConfig out.

The pipeline is linear:
  1. Read the file as UTF-8 text
  2. Parse it with yaml.safe_load into a plain dict
  3. Validate the dict against the pydantic schema

Any failure stops loading with a ConfigLoadError or ConfigValidationError.
There are no fallbacks for a broken file. The only defaults are the ones the
schema declares for sections that are absent.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from number_words.config.exceptions import ConfigLoadError, ConfigValidationError
from number_words.config.schema import (
    BenchConfig,
    GlobalConfig,
    NumberWordsConfig,
    ParserConfig,
    TableConfig,
)

DEFAULT_CONFIG_VERSION = "1.0.0"


def _read_yaml_mapping(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML file that must contain a mapping at the top level.

    Raises:
        ConfigLoadError: Missing file, unreadable file, bad YAML, or a
            top-level value that isn't a mapping.
    """
    if not config_path.is_file():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping, got {type(parsed).__name__}"
        )
    return parsed


def load_config(config_path: Path) -> NumberWordsConfig:
    """
    Load and validate a config file.

    Args:
        config_path: Path to a YAML config file.

    Returns:
        A frozen NumberWordsConfig. Optional sections that were absent stay None.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types,
            unknown keys, one-character symbols that aren't).
    """
    raw_data = _read_yaml_mapping(config_path)

    try:
        return NumberWordsConfig.model_validate(raw_data)
    except ValidationError as err:
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}"
        ) from err


def default_config() -> NumberWordsConfig:
    """The config you get when no file is given: every section at its defaults."""
    return NumberWordsConfig(
        global_config=GlobalConfig(config_version=DEFAULT_CONFIG_VERSION),
        table=TableConfig(),
        parser=ParserConfig(),
        bench=BenchConfig(),
    )


def load_config_or_default(config_path: Optional[Path]) -> NumberWordsConfig:
    """
    Load `config_path` if given, otherwise return default_config().

    Sections missing from a loaded file are filled with their defaults so
    callers never need to None-check table/parser/bench.
    """
    if config_path is None:
        return default_config()

    config = load_config(config_path)
    return config.model_copy(
        update={
            "table": config.table or TableConfig(),
            "parser": config.parser or ParserConfig(),
            "bench": config.bench or BenchConfig(),
        }
    )
