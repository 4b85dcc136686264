# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema source backed by SQLAlchemy's runtime inspection API.

Raw column types are rendered with the bind's dialect and lower-cased, so a
MySQL ``TINYINT(1)`` is reported as ``tinyint(1)``. Indexes are gathered from
three reflection calls: the primary key constraint, unique constraints, and
regular indexes.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import CompileError

from modelinfo.model.schema import ColumnInfo, IndexInfo

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SqlAlchemySchemaSource:
    """Reads columns and indexes through ``sqlalchemy.inspect``.

    Args:
        bind: An engine or connection to reflect from.
        schema: Optional database schema name (e.g. ``public``).
    """

    def __init__(self, bind: Engine | Connection, schema: str | None = None) -> None:
        self._bind = bind
        self._schema = schema

    def get_columns(self, table: str) -> list[ColumnInfo]:
        inspector = inspect(self._bind)
        reflected = inspector.get_columns(table, schema=self._schema)
        pk_columns = inspector.get_pk_constraint(table, schema=self._schema).get("constrained_columns") or []

        columns: list[ColumnInfo] = []
        for col in reflected:
            raw_type = self._render_type(col["type"])
            type_name = _type_name(raw_type)
            columns.append(
                ColumnInfo(
                    name=col["name"],
                    type=raw_type,
                    type_name=type_name,
                    auto_increment=_auto_increment(col, type_name, pk_columns, self._bind.dialect.name),
                    nullable=bool(col.get("nullable", True)),
                    default=col.get("default"),
                )
            )
        logger.debug("Reflected %d columns of table '%s'", len(columns), table)
        return columns

    def get_indexes(self, table: str) -> list[IndexInfo]:
        inspector = inspect(self._bind)
        indexes: list[IndexInfo] = []

        pk = inspector.get_pk_constraint(table, schema=self._schema)
        if pk.get("constrained_columns"):
            indexes.append(
                IndexInfo(name=pk.get("name"), columns=list(pk["constrained_columns"]), primary=True, unique=True)
            )

        try:
            unique_constraints = inspector.get_unique_constraints(table, schema=self._schema)
        except NotImplementedError:
            unique_constraints = []
        for constraint in unique_constraints:
            indexes.append(IndexInfo(name=constraint.get("name"), columns=list(constraint["column_names"]), unique=True))

        for ix in inspector.get_indexes(table, schema=self._schema):
            if ix.get("duplicates_constraint"):
                continue
            column_names = ix.get("column_names") or []
            # Expression indexes report None for the computed parts.
            if not column_names or any(name is None for name in column_names):
                continue
            indexes.append(IndexInfo(name=ix.get("name"), columns=list(column_names), unique=bool(ix.get("unique"))))

        logger.debug("Reflected %d indexes of table '%s'", len(indexes), table)
        return indexes

    def _render_type(self, column_type: Any) -> str:
        try:
            rendered = column_type.compile(dialect=self._bind.dialect)
        except CompileError:
            rendered = type(column_type).__name__
        return str(rendered).lower()


# ################
# Implementation
# ################

_TYPE_NAME_RE = re.compile(r"[a-z_][a-z0-9_]*")

_INTEGER_TYPE_NAMES = frozenset({"integer", "int", "int2", "int4", "int8", "smallint", "bigint", "mediumint", "tinyint"})


def _type_name(raw_type: str) -> str:
    """Return the leading identifier of a rendered type, e.g. ``varchar`` for ``varchar(255)``."""
    match = _TYPE_NAME_RE.match(raw_type)
    return match.group(0) if match else raw_type


def _auto_increment(col: dict[str, Any], type_name: str, pk_columns: list[str], dialect_name: str) -> bool:
    """Use the reflected flag when the dialect reports one.

    SQLite never reports the flag; there a sole integer primary key is an alias
    of the rowid and counts as auto-incrementing. Other dialects that omit the
    flag do so for columns without auto-increment.
    """
    flag = col.get("autoincrement")
    if isinstance(flag, bool):
        return flag
    if dialect_name != "sqlite":
        return False
    return pk_columns == [col["name"]] and type_name in _INTEGER_TYPE_NAMES
