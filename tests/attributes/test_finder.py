# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for attribute resolution over a schema source and a record type."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from modelinfo.attributes import AttributeFinder, find_attributes
from modelinfo.model import Attribute, ColumnInfo, IndexInfo, TransformKind
from modelinfo.records import ComputedAttribute, Record, RecordResolutionError
from modelinfo.schema import SchemaSnapshot, SnapshotSchemaSource, TableNotFoundError, TableSnapshot

# ###############
# Helpers
# ###############


class Status(Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class Plan(Enum):
    FREE = object()


class User(Record):
    table = "users"
    fillable = ("email", "display_name")
    hidden = ("password",)
    appends = ("display_name",)
    casts = {"settings": "array"}

    def get_display_name_attribute(self) -> str:
        return ""

    def set_display_name_attribute(self, value: str) -> None:
        pass

    def set_password_attribute(self, value: str) -> None:
        pass

    def get_email_attribute(self) -> str:
        return ""

    def avatar(self) -> ComputedAttribute:
        return ComputedAttribute()


class Account(Record):
    table = "accounts"
    defaults = {"status": Status.ACTIVE, "plan": Plan.FREE, "credits": 0, "note": None}


class Bare(Record):
    table = "users"


def _users_table() -> TableSnapshot:
    return TableSnapshot(
        columns=[
            ColumnInfo(name="id", type="integer", type_name="integer", auto_increment=True, nullable=False),
            ColumnInfo(name="email", type="varchar(255)", type_name="varchar", nullable=False),
            ColumnInfo(name="created_at", type="timestamp", type_name="timestamp", nullable=True),
        ],
        indexes=[
            IndexInfo(name="users_pkey", columns=["id"], primary=True, unique=True),
            IndexInfo(name="users_email_unique", columns=["email"], unique=True),
        ],
    )


def _accounts_table() -> TableSnapshot:
    return TableSnapshot(
        columns=[
            ColumnInfo(name="status", type="varchar(20)", type_name="varchar", default="'pending'"),
            ColumnInfo(name="plan", type="varchar(20)", type_name="varchar"),
            ColumnInfo(name="credits", type="integer", type_name="integer", default="10"),
            ColumnInfo(name="note", type="text", type_name="text", default="'n/a'"),
            ColumnInfo(name="active", type="tinyint(1)", type_name="tinyint", default="1"),
        ],
    )


def _source() -> SnapshotSchemaSource:
    return SnapshotSchemaSource(SchemaSnapshot(tables={"users": _users_table(), "accounts": _accounts_table()}))


class _CountingSource(SnapshotSchemaSource):
    """Records each schema read."""

    def __init__(self, snapshot: SchemaSnapshot) -> None:
        super().__init__(snapshot)
        self.calls: list[tuple[str, str]] = []

    def get_columns(self, table: str) -> list[ColumnInfo]:
        self.calls.append(("columns", table))
        return super().get_columns(table)

    def get_indexes(self, table: str) -> list[IndexInfo]:
        self.calls.append(("indexes", table))
        return super().get_indexes(table)


def _by_name(attributes: list[Attribute]) -> dict[str, Attribute]:
    return {a.name: a for a in attributes}


# ###############
# Column attributes
# ###############


def test_columns_without_virtual_methods() -> None:
    """A plain table yields one attribute per column in schema order."""
    attributes = AttributeFinder(_source()).attributes(Bare())

    assert [a.name for a in attributes] == ["id", "email", "created_at"]
    assert [a.primary for a in attributes] == [True, False, False]
    assert [a.unique for a in attributes] == [True, True, False]
    assert [a.semantic_type for a in attributes] == ["int", "string", "DateTime"]
    assert [a.storage_type for a in attributes] == ["integer", "varchar(255)", "timestamp"]
    assert [a.auto_increment for a in attributes] == [True, False, False]
    assert [a.nullable for a in attributes] == [False, False, True]
    assert all(a.virtual is False and a.appended is None for a in attributes)


def test_column_transforms() -> None:
    """Columns report key casts, date casts and accessors."""
    attributes = _by_name(AttributeFinder(_source()).attributes(User()))

    assert (attributes["id"].transform_kind, attributes["id"].cast) == (TransformKind.CAST, "int")
    assert (attributes["created_at"].transform_kind, attributes["created_at"].cast) == (
        TransformKind.CAST,
        "datetime",
    )
    assert (attributes["email"].transform_kind, attributes["email"].cast) == (TransformKind.ACCESSOR, "accessor")


def test_column_fillable_and_hidden() -> None:
    """Column attributes report fillable and hidden from the record."""
    attributes = _by_name(AttributeFinder(_source()).attributes(User()))

    assert attributes["email"].fillable is True
    assert attributes["id"].fillable is False
    assert attributes["email"].hidden is False


# ###############
# Defaults
# ###############


def test_defaults_prefer_in_memory_values() -> None:
    """Current values win over schema defaults; enumeration members are unwrapped."""
    attributes = _by_name(AttributeFinder(_source()).attributes(Account()))

    assert attributes["status"].default == "active"
    assert attributes["plan"].default == "FREE"
    assert attributes["credits"].default == 0


def test_defaults_fall_back_to_schema_default() -> None:
    """Unset or None in-memory values fall back to the schema default."""
    attributes = _by_name(AttributeFinder(_source()).attributes(Account()))

    assert attributes["note"].default == "'n/a'"
    assert attributes["active"].default == "1"
    assert attributes["active"].semantic_type == "bool"


def test_defaults_follow_record_instance_state() -> None:
    """Values assigned to the instance are reported as defaults."""
    account = Account().force_fill(status=Status.SUSPENDED)
    assert _by_name(AttributeFinder(_source()).attributes(account))["status"].default == "suspended"


# ###############
# Virtual attributes
# ###############


def test_virtual_attributes_follow_columns() -> None:
    """Virtual attributes are appended after columns; column names are never duplicated."""
    attributes = AttributeFinder(_source()).attributes(User())

    assert [a.name for a in attributes] == ["id", "email", "created_at", "display_name", "password", "avatar"]
    assert [a.virtual for a in attributes] == [False, False, False, True, True, True]


def test_virtual_attribute_details() -> None:
    """Collapsed and mutator-only virtual attributes carry their record flags."""
    attributes = _by_name(AttributeFinder(_source()).attributes(User()))

    display_name = attributes["display_name"]
    assert display_name.transform_kind is TransformKind.ATTRIBUTE
    assert display_name.semantic_type == "str"
    assert display_name.appended is True
    assert display_name.fillable is True

    password = attributes["password"]
    assert password.transform_kind is TransformKind.MUTATOR
    assert password.hidden is True
    assert password.appended is False


def test_names_are_unique() -> None:
    """No attribute name is reported twice."""
    names = [a.name for a in AttributeFinder(_source()).attributes(User())]
    assert len(names) == len(set(names))


# ###############
# Resolution behavior
# ###############


def test_schema_is_read_once_per_resolution() -> None:
    """Each resolution performs exactly one column read and one index read."""
    source = _CountingSource(SchemaSnapshot(tables={"users": _users_table()}))
    AttributeFinder(source).attributes(User())
    assert source.calls == [("columns", "users"), ("indexes", "users")]


def test_resolution_is_idempotent() -> None:
    """Repeated resolutions produce identical results."""
    finder = AttributeFinder(_source())
    assert finder.attributes(User()) == finder.attributes(User())


def test_schema_errors_propagate() -> None:
    """Schema source errors reach the caller unchanged."""

    class Missing(Record):
        table = "missing"

    with pytest.raises(TableNotFoundError):
        AttributeFinder(_source()).attributes(Missing())


# ###############
# find_attributes
# ###############


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE users ("
                " id INTEGER PRIMARY KEY AUTOINCREMENT,"
                " email VARCHAR(255) NOT NULL,"
                " created_at TIMESTAMP NULL,"
                " CONSTRAINT users_email_unique UNIQUE (email)"
                ")"
            )
        )
    yield engine
    engine.dispose()


def test_find_attributes_with_engine(engine: Engine) -> None:
    """An engine is reflected through SQLAlchemy."""
    attributes = find_attributes(Bare, engine)

    assert [a.name for a in attributes] == ["id", "email", "created_at"]
    assert [a.primary for a in attributes] == [True, False, False]
    assert [a.unique for a in attributes] == [True, True, False]
    assert [a.semantic_type for a in attributes] == ["int", "string", "DateTime"]


def test_find_attributes_with_schema_source_and_instance() -> None:
    """A record instance and a schema source are used as given."""
    user = User()
    attributes = find_attributes(user, _source())
    assert attributes[0].name == "id"


def test_find_attributes_rejects_non_records() -> None:
    """Classes that are not records are rejected."""
    with pytest.raises(RecordResolutionError):
        find_attributes(object, _source())  # type: ignore[arg-type]
