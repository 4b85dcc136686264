# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""The interface through which table schemas are read."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from modelinfo.model.schema import ColumnInfo, IndexInfo

# ###############
# Public Interface
# ###############


@runtime_checkable
class SchemaSource(Protocol):
    """Reports the columns and indexes of a table.

    Implementations raise their own errors for missing tables or unreachable
    databases; callers let those propagate.
    """

    def get_columns(self, table: str) -> list[ColumnInfo]:
        """Return the table's columns in schema order."""
        ...

    def get_indexes(self, table: str) -> list[IndexInfo]:
        """Return all indexes and key constraints of the table."""
        ...
