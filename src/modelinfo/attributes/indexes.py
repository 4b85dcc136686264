# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-column primary and unique flags derived from table indexes.

Only single-column indexes count: a column covered solely by a composite
index is neither primary nor unique on its own.
"""

from __future__ import annotations

from modelinfo.model.schema import IndexInfo

# ###############
# Public Interface
# ###############


def column_indexes(column: str, indexes: list[IndexInfo]) -> list[IndexInfo]:
    """Return the indexes that cover exactly *column* and nothing else."""
    return [index for index in indexes if index.columns == [column]]


def is_primary(column: str, indexes: list[IndexInfo]) -> bool:
    return any(index.primary for index in column_indexes(column, indexes))


def is_unique(column: str, indexes: list[IndexInfo]) -> bool:
    return any(index.unique for index in column_indexes(column, indexes))
