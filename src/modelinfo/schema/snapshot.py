# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML schema snapshots, for resolving attributes without a live database."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modelinfo.model.schema import ColumnInfo, IndexInfo

# ###############
# Public Interface
# ###############


class SchemaSnapshotError(Exception):
    """Raised when a schema snapshot file cannot be read or is invalid."""


class TableNotFoundError(Exception):
    """Raised when a schema source does not know the requested table."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Table '{table}' not found")
        self.table = table


class TableSnapshot(BaseModel):
    """Columns and indexes of one table."""

    model_config = ConfigDict(extra="forbid")

    columns: list[ColumnInfo] = Field(default_factory=list)
    indexes: list[IndexInfo] = Field(default_factory=list)


class SchemaSnapshot(BaseModel):
    """A set of table schemas keyed by table name."""

    model_config = ConfigDict(extra="forbid")

    tables: dict[str, TableSnapshot] = Field(default_factory=dict)


class SnapshotSchemaSource:
    """Serves columns and indexes from a :class:`SchemaSnapshot`."""

    def __init__(self, snapshot: SchemaSnapshot) -> None:
        self._snapshot = snapshot

    def get_columns(self, table: str) -> list[ColumnInfo]:
        return list(self._table(table).columns)

    def get_indexes(self, table: str) -> list[IndexInfo]:
        return list(self._table(table).indexes)

    def _table(self, table: str) -> TableSnapshot:
        try:
            return self._snapshot.tables[table]
        except KeyError:
            raise TableNotFoundError(table) from None


def load_schema_snapshot(path: Path) -> SchemaSnapshot:
    """Load and validate a schema snapshot from disk.

    An empty file is treated as a snapshot without tables.

    Args:
        path: Path to the YAML snapshot file.

    Returns:
        A validated SchemaSnapshot instance.

    Raises:
        SchemaSnapshotError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaSnapshotError(f"Cannot read schema snapshot '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SchemaSnapshotError(f"Invalid YAML in schema snapshot '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        return SchemaSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SchemaSnapshotError(f"Invalid schema snapshot '{path}': {exc}") from exc
