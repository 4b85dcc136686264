# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for column type inference."""

import pytest

from modelinfo.attributes import ScalarKind, column_semantic_type, infer_semantic_type
from modelinfo.model import ColumnInfo

# ###############
# Exact matches
# ###############


@pytest.mark.parametrize("raw_type", ["tinyint(1)", "TINYINT(1)", "bit"])
def test_exact_boolean_types(raw_type: str) -> None:
    """Single-bit types are booleans, whatever their type name says."""
    assert infer_semantic_type(raw_type, "tinyint") is ScalarKind.BOOL


def test_exact_match_wins_over_family() -> None:
    """tinyint(1) is a boolean even though tinyint belongs to the integer family."""
    assert infer_semantic_type("tinyint(1)", "tinyint") is ScalarKind.BOOL
    assert infer_semantic_type("tinyint(4)", "tinyint") is ScalarKind.INT


# ###############
# Type families
# ###############


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [
        ("integer", ScalarKind.INT),
        ("int4", ScalarKind.INT),
        ("smallint", ScalarKind.INT),
        ("mediumint", ScalarKind.INT),
        ("double", ScalarKind.FLOAT),
        ("float8", ScalarKind.FLOAT),
        ("real", ScalarKind.FLOAT),
        ("bytea", ScalarKind.RESOURCE),
        ("longblob", ScalarKind.RESOURCE),
        ("boolean", ScalarKind.BOOL),
        ("date", ScalarKind.DATETIME),
        ("timestamptz", ScalarKind.DATETIME),
        ("datetime2", ScalarKind.DATETIME),
        ("jsonb", ScalarKind.MIXED),
        ("JSON", ScalarKind.MIXED),
    ],
)
def test_type_families(type_name: str, expected: ScalarKind) -> None:
    """Each member of a type family maps to the family's scalar kind."""
    assert infer_semantic_type(type_name, type_name) is expected


# ###############
# Fallback
# ###############


@pytest.mark.parametrize("type_name", ["varchar", "text", "bigint", "decimal", "uuid", "enum", "geometry", ""])
def test_unknown_or_unmapped_types_fall_back_to_string(type_name: str) -> None:
    """Unknown types are reported as strings."""
    assert infer_semantic_type(type_name, type_name) is ScalarKind.STRING


def test_missing_type_name_falls_back_to_string() -> None:
    """Without a type name, only exact matches apply; everything else is a string."""
    assert infer_semantic_type("integer") is ScalarKind.STRING


def test_column_semantic_type_returns_label() -> None:
    """Column inference reports the label string."""
    column = ColumnInfo(name="created_at", type="timestamp", type_name="timestamp")
    assert column_semantic_type(column) == "DateTime"
