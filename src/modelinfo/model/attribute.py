# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""The unified attribute descriptor produced for a record type."""

from __future__ import annotations

import base64
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

# ###############
# Public Interface
# ###############


class TransformKind(Enum):
    """How a record transforms the value of an attribute."""

    CAST = "cast"
    ACCESSOR = "accessor"
    MUTATOR = "mutator"
    ATTRIBUTE = "attribute"


class Attribute(BaseModel):
    """A named, typed field of a record, backed by a column or purely behavioral.

    Attributes:
        name: Attribute name, unique within one resolution result.
        semantic_type: Best-effort scalar kind. Column attributes always carry a
            label; virtual attributes carry the declared annotation, if any.
        storage_type: Raw column type as reported by the schema source.
        auto_increment: Whether the column is auto-incrementing.
        nullable: Whether the column accepts NULL; ``None`` for virtual attributes.
        default: The current in-memory value or the column's schema default.
            Binary values are base64-encoded in JSON dumps.
        primary: Covered by a single-column primary index.
        unique: Covered by a single-column unique index.
        fillable: Whether the attribute can be mass-assigned.
        appended: Whether a virtual attribute is appended to the record's
            external representation; ``None`` for column attributes.
        transform_kind: How the record transforms the value, if at all.
        cast: Cast label (e.g. ``datetime``) or transform marker.
        virtual: ``True`` iff no backing column exists.
        hidden: Whether the attribute is suppressed from external representation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    semantic_type: str | None = None
    storage_type: str | None = None
    auto_increment: bool = False
    nullable: bool | None = None
    default: Any = None
    primary: bool | None = None
    unique: bool | None = None
    fillable: bool = False
    appended: bool | None = None
    transform_kind: TransformKind | None = None
    cast: str | None = None
    virtual: bool = False
    hidden: bool = False

    @field_serializer("default", when_used="json")
    def serialize_default(self, value: Any) -> Any:
        # Binary defaults (e.g. of blob columns) need not be valid UTF-8.
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(value).decode("ascii")
        return value
