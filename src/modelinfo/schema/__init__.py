# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema sources: live database reflection and YAML snapshots."""

from modelinfo.schema.snapshot import (
    SchemaSnapshot,
    SchemaSnapshotError,
    SnapshotSchemaSource,
    TableNotFoundError,
    TableSnapshot,
    load_schema_snapshot,
)
from modelinfo.schema.source import SchemaSource
from modelinfo.schema.sqlalchemy_source import SqlAlchemySchemaSource

__all__ = [
    "SchemaSnapshot",
    "SchemaSnapshotError",
    "SchemaSource",
    "SnapshotSchemaSource",
    "SqlAlchemySchemaSource",
    "TableNotFoundError",
    "TableSnapshot",
    "load_schema_snapshot",
]
