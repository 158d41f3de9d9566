# Copyright 2026 Monkeylang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file for the monkeylang command-line driver."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".monkeylang.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class DriverConfig(BaseModel):
    """Settings for the ``monkeylang`` command.

    Attributes:
        output_format: How ``parse`` prints the resulting program.
        fail_on_diagnostics: Exit with status 1 when the parser recorded diagnostics.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: Literal["text", "json"] = Field(alias="output-format", default="text")
    fail_on_diagnostics: bool = Field(alias="fail-on-diagnostics", default=True)


def load_config(path: Path) -> DriverConfig:
    """Load and validate a driver configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated DriverConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file '{path}' is not valid UTF-8: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return DriverConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> DriverConfig:
    """Load ``.monkeylang.yaml`` from *directory*, or return defaults if there is none."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return DriverConfig()
    return load_config(path)
