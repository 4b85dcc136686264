# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ``.modelinfo.yaml`` configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".modelinfo.yaml"

OUTPUT_FORMATS = ("table", "json")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ModelInfoConfig:
    """Settings for resolving record attributes from the command line.

    Attributes:
        database_url: SQLAlchemy URL of the database to reflect.
        schema_file: Path to a YAML schema snapshot, used instead of a database.
        schema: Database schema name (e.g. ``public``).
        format: Output format, one of ``table`` or ``json``.
    """

    database_url: str | None = None
    schema_file: str | None = None
    schema: str | None = None
    format: str = "table"


def load_config(path: Path) -> ModelInfoConfig:
    """Load and parse a configuration file.

    Args:
        path: Path to the ``.modelinfo.yaml`` file.

    Returns:
        A ModelInfoConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"database-url", "schema-file", "schema", "format"})


def _parse_config(text: str, source_label: str = "<string>") -> ModelInfoConfig:
    """Parse config YAML text into a ModelInfoConfig.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the YAML is invalid, a key is unknown, or a value has
            the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ModelInfoConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = ModelInfoConfig(
        database_url=_optional_string(data, "database-url", source_label),
        schema_file=_optional_string(data, "schema-file", source_label),
        schema=_optional_string(data, "schema", source_label),
        format=_optional_string(data, "format", source_label) or "table",
    )

    if config.database_url and config.schema_file:
        raise ConfigError(f"{source_label}: specify either 'database-url' or 'schema-file', not both")
    if config.format not in OUTPUT_FORMATS:
        raise ConfigError(f"{source_label}: 'format' must be one of {', '.join(OUTPUT_FORMATS)}")

    return config


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising ConfigError on a wrong type."""
    value = mapping.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
