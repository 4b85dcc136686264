# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Physical schema facts reported by a schema source."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ColumnInfo(BaseModel):
    """A column of a relational table.

    Attributes:
        name: Column name.
        type: Raw column type, e.g. ``varchar(255)`` or ``tinyint(1)``.
        type_name: Normalized type name without modifiers, e.g. ``varchar``.
        auto_increment: Whether the database generates values for the column.
        nullable: Whether the column accepts NULL.
        default: The declared schema default, as reported by the database.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type: str
    type_name: str = _Field(alias="type-name")
    auto_increment: bool = _Field(alias="auto-increment", default=False)
    nullable: bool = True
    default: Any = None


class IndexInfo(BaseModel):
    """An index or key constraint of a relational table."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    columns: list[str] = _Field(default_factory=list)
    primary: bool = False
    unique: bool = False
