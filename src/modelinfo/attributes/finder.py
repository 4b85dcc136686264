# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Attribute resolution for record types.

Combines the physical schema of a record's table with the record's behavioral
metadata into one ordered list of :class:`~modelinfo.model.attribute.Attribute`
descriptors: one per column in schema order, followed by the record's virtual
attributes in discovery order.

Each resolution reads the schema exactly once (one ``get_columns`` and one
``get_indexes`` call) and builds its result from scratch. Schema source errors
propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.engine import Connection, Engine

from modelinfo.attributes.behavior import resolve_transform
from modelinfo.attributes.indexes import is_primary, is_unique
from modelinfo.attributes.inference import column_semantic_type
from modelinfo.attributes.virtual import virtual_attributes
from modelinfo.attributes.visibility import is_hidden
from modelinfo.model.attribute import Attribute
from modelinfo.model.schema import ColumnInfo, IndexInfo
from modelinfo.model.values import classify, unwrap
from modelinfo.records.base import Record
from modelinfo.records.introspection import RecordIntrospection, resolve_record
from modelinfo.schema.source import SchemaSource
from modelinfo.schema.sqlalchemy_source import SqlAlchemySchemaSource

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class AttributeFinder:
    """Resolves the attributes of records whose tables live in one schema source."""

    def __init__(self, schema: SchemaSource) -> None:
        self._schema = schema

    def attributes(self, record: RecordIntrospection) -> list[Attribute]:
        """Return the column attributes of *record* followed by its virtual attributes."""
        table = record.get_table()
        columns = self._schema.get_columns(table)
        indexes = self._schema.get_indexes(table)
        logger.debug("Table '%s': %d columns, %d indexes", table, len(columns), len(indexes))

        attributes = [_column_attribute(column, indexes, record) for column in columns]
        attributes.extend(virtual_attributes(record, (column.name for column in columns)))
        return attributes


def find_attributes(
    record: Record | type[Record] | str,
    schema: SchemaSource | Engine | Connection,
) -> list[Attribute]:
    """Resolve the attributes of a record type.

    Args:
        record: A record instance, a record class (instantiated without
            arguments), or an import string such as ``app.models:User``.
        schema: A schema source, or a SQLAlchemy engine or connection to
            reflect the table from.

    Returns:
        Column attributes in schema order, then virtual attributes.

    Raises:
        RecordResolutionError: If *record* cannot be resolved to a record.
    """
    if isinstance(schema, (Engine, Connection)):
        schema = SqlAlchemySchemaSource(schema)
    return AttributeFinder(schema).attributes(resolve_record(record))


# ################
# Implementation
# ################


def _column_attribute(column: ColumnInfo, indexes: list[IndexInfo], record: RecordIntrospection) -> Attribute:
    transform_kind, cast = resolve_transform(column.name, record)
    return Attribute(
        name=column.name,
        semantic_type=column_semantic_type(column),
        storage_type=column.type,
        auto_increment=column.auto_increment,
        nullable=column.nullable,
        default=_column_default(column, record),
        primary=is_primary(column.name, indexes),
        unique=is_unique(column.name, indexes),
        fillable=record.is_fillable(column.name),
        appended=None,
        transform_kind=transform_kind,
        cast=cast,
        virtual=False,
        hidden=is_hidden(column.name, record),
    )


def _column_default(column: ColumnInfo, record: RecordIntrospection) -> Any:
    """Prefer the record's current value (enumeration members unwrapped) over the schema default."""
    current = record.get_attributes().get(column.name)
    if current is None:
        return column.default
    return unwrap(classify(current))
