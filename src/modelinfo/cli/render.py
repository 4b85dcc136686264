# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text renderings of resolved attributes."""

from __future__ import annotations

import json
from typing import Any

from rich.table import Table
from rich.text import Text

from modelinfo.model.attribute import Attribute

# ###############
# Public Interface
# ###############


def render_json(attributes: list[Attribute]) -> str:
    """Render attributes as an indented JSON array."""
    return json.dumps([attribute.model_dump(mode="json") for attribute in attributes], indent=2)


def render_table(attributes: list[Attribute], title: str | None = None) -> Table:
    """Build a table with one row per attribute.

    Virtual attributes are dimmed.
    """
    table = Table(title=title, show_header=True, header_style="bold")
    for header, _, style in _COLUMNS:
        table.add_column(header, style=style, no_wrap=True)
    for attribute in attributes:
        # Cells are plain text so that defaults such as "[1]" are not read as markup.
        table.add_row(
            *(Text(_cell(getattr(attribute, key))) for _, key, _ in _COLUMNS),
            style="dim" if attribute.virtual else None,
        )
    return table


# ################
# Implementation
# ################

_COLUMNS: list[tuple[str, str, str | None]] = [
    ("Name", "name", "cyan"),
    ("Type", "semantic_type", None),
    ("Storage", "storage_type", None),
    ("Nullable", "nullable", None),
    ("Default", "default", None),
    ("Primary", "primary", None),
    ("Unique", "unique", None),
    ("Fillable", "fillable", None),
    ("Hidden", "hidden", None),
    ("Cast", "cast", None),
    ("Virtual", "virtual", None),
]


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)
