# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the ModelInfo command-line interface."""

from modelinfo.settings.config import (
    CONFIG_FILE_NAME,
    OUTPUT_FORMATS,
    ConfigError,
    ModelInfoConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "OUTPUT_FORMATS",
    "ConfigError",
    "ModelInfoConfig",
    "load_config",
]
