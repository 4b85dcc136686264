# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Best-guess scalar kinds for column types.

Resolution order:

1. Exact match on the raw column type (``tinyint(1)`` and ``bit`` are booleans).
2. Family match on the normalized type name.
3. ``string`` for everything else, including ``bigint``, ``decimal`` and ``uuid``.
"""

from __future__ import annotations

from enum import Enum

from modelinfo.model.schema import ColumnInfo

# ###############
# Public Interface
# ###############


class ScalarKind(Enum):
    """Semantic scalar kinds inferred for columns."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    RESOURCE = "resource"
    DATETIME = "DateTime"
    MIXED = "mixed"
    STRING = "string"


def infer_semantic_type(raw_type: str, type_name: str | None = None) -> ScalarKind:
    """Return the scalar kind for a column type. Never raises."""
    exact = _EXACT_TYPES.get(raw_type.strip().lower())
    if exact is not None:
        return exact
    if type_name:
        family = _TYPE_FAMILIES.get(type_name.strip().lower())
        if family is not None:
            return family
    return ScalarKind.STRING


def column_semantic_type(column: ColumnInfo) -> str:
    """Return the scalar kind label for *column*."""
    return infer_semantic_type(column.type, column.type_name).value


# ################
# Implementation
# ################

_EXACT_TYPES: dict[str, ScalarKind] = {
    "tinyint(1)": ScalarKind.BOOL,
    "bit": ScalarKind.BOOL,
}


def _family(kind: ScalarKind, *names: str) -> dict[str, ScalarKind]:
    return dict.fromkeys(names, kind)


_TYPE_FAMILIES: dict[str, ScalarKind] = {
    **_family(ScalarKind.INT, "tinyint", "integer", "int", "int4", "smallint", "int2", "mediumint"),
    **_family(ScalarKind.FLOAT, "float", "real", "float4", "double", "float8"),
    **_family(
        ScalarKind.RESOURCE,
        "binary",
        "varbinary",
        "bytea",
        "image",
        "blob",
        "tinyblob",
        "mediumblob",
        "longblob",
    ),
    **_family(ScalarKind.BOOL, "boolean", "bool"),
    **_family(
        ScalarKind.DATETIME,
        "date",
        "time",
        "timetz",
        "datetime",
        "datetime2",
        "smalldatetime",
        "datetimeoffset",
        "timestamp",
        "timestamptz",
    ),
    **_family(ScalarKind.MIXED, "json", "jsonb"),
}
