# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base class for record types and their declarative behavior.

A record type declares its table, mass-assignment rules, visibility rules,
casts and appended attributes as class-level settings, and defines accessors,
mutators and computed attributes as methods::

    class User(Record):
        table = "users"
        fillable = ("email",)
        hidden = ("password",)
        casts = {"settings": "array"}
        appends = ("display_name",)

        def get_display_name_attribute(self) -> str:
            ...

        def set_password_attribute(self, value: str) -> None:
            ...

        def initials(self) -> ComputedAttribute:
            return ComputedAttribute.make(get=lambda value: value[:2])
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from modelinfo.records.naming import accessor_method_names, camel, mutator_method_names, snake
from modelinfo.records.signatures import MethodInfo, declared_methods_of, return_annotation

# ###############
# Public Interface
# ###############


class MassAssignmentError(Exception):
    """Raised when a totally guarded record is mass-assigned."""

    def __init__(self, key: str, record_name: str) -> None:
        super().__init__(f"Add '{key}' to the fillable attributes to allow mass assignment on {record_name}")
        self.key = key


@dataclass(frozen=True)
class ComputedAttribute:
    """A single definition of both the read and the write transformation of an attribute."""

    get: Callable[..., Any] | None = None
    set: Callable[..., Any] | None = None

    @classmethod
    def make(
        cls,
        get: Callable[..., Any] | None = None,
        set: Callable[..., Any] | None = None,  # noqa: A002
    ) -> ComputedAttribute:
        return cls(get=get, set=set)


class Record:
    """A persisted record type.

    Instances hold the record's current in-memory attribute values, seeded from
    :attr:`defaults` and then mass-assigned from the constructor's keyword
    arguments.
    """

    table: ClassVar[str | None] = None
    primary_key: ClassVar[str] = "id"
    key_type: ClassVar[str] = "int"
    incrementing: ClassVar[bool] = True

    timestamps: ClassVar[bool] = True
    CREATED_AT: ClassVar[str | None] = "created_at"
    UPDATED_AT: ClassVar[str | None] = "updated_at"

    fillable: ClassVar[Sequence[str]] = ()
    guarded: ClassVar[Sequence[str]] = ("*",)
    hidden: ClassVar[Sequence[str]] = ()
    visible: ClassVar[Sequence[str]] = ()
    appends: ClassVar[Sequence[str]] = ()
    dates: ClassVar[Sequence[str]] = ()
    casts: ClassVar[Mapping[str, str]] = {}
    defaults: ClassVar[Mapping[str, Any]] = {}

    def __init__(self, **attributes: Any) -> None:
        self._attributes: dict[str, Any] = dict(self.defaults)
        self.fill(**attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    # -------- table --------

    def get_table(self) -> str:
        """Return the backing table name, derived from the class name unless set."""
        if self.table:
            return self.table
        return snake(type(self).__name__) + "s"

    def get_key_name(self) -> str:
        return self.primary_key

    # -------- mass assignment --------

    def fill(self, **attributes: Any) -> Record:
        """Assign fillable attributes, skipping guarded ones.

        Raises:
            MassAssignmentError: If the record is totally guarded and any
                attribute is not fillable.
        """
        totally_guarded = self.totally_guarded()
        for key, value in attributes.items():
            if self.is_fillable(key):
                self._attributes[key] = value
            elif totally_guarded:
                raise MassAssignmentError(key, type(self).__name__)
        return self

    def force_fill(self, **attributes: Any) -> Record:
        """Assign attributes without checking mass-assignment rules."""
        self._attributes.update(attributes)
        return self

    def is_fillable(self, key: str) -> bool:
        if key in self.fillable:
            return True
        if self.is_guarded(key):
            return False
        return not self.fillable and "." not in key and not key.startswith("_")

    def is_guarded(self, key: str) -> bool:
        if not self.guarded:
            return False
        return list(self.guarded) == ["*"] or key in self.guarded

    def totally_guarded(self) -> bool:
        return not self.fillable and list(self.guarded) == ["*"]

    # -------- serialization rules --------

    def get_hidden(self) -> list[str]:
        return list(self.hidden)

    def get_visible(self) -> list[str]:
        return list(self.visible)

    def has_appended(self, key: str) -> bool:
        return key in self.appends

    # -------- casts --------

    def get_casts(self) -> dict[str, str]:
        """Return the declared casts, preceded by the key cast for incrementing records."""
        if self.incrementing:
            return {self.get_key_name(): self.key_type, **self.casts}
        return dict(self.casts)

    def get_dates(self) -> list[str | None]:
        """Return the attributes treated as dates: timestamp columns, then :attr:`dates`."""
        timestamp_columns = [self.CREATED_AT, self.UPDATED_AT] if self.timestamps else []
        return [*timestamp_columns, *self.dates]

    # -------- accessors and mutators --------

    def has_get_mutator(self, key: str) -> bool:
        return any(callable(getattr(type(self), name, None)) for name in accessor_method_names(key))

    def has_set_mutator(self, key: str) -> bool:
        return any(callable(getattr(type(self), name, None)) for name in mutator_method_names(key))

    def has_attribute_mutator(self, key: str) -> bool:
        """Return True if a method named *key* (or its camel-case form) returns a :class:`ComputedAttribute`."""
        for name in dict.fromkeys((key, camel(key))):
            method = getattr(type(self), name, None)
            if callable(method) and _is_computed_attribute(return_annotation(method)):
                return True
        return False

    # -------- introspection --------

    def get_attributes(self) -> dict[str, Any]:
        """Return a copy of the current in-memory attribute values."""
        return dict(self._attributes)

    def declared_methods(self) -> list[MethodInfo]:
        """Describe the methods declared directly on this record's class."""
        return declared_methods_of(type(self))


# ################
# Implementation
# ################


def _is_computed_attribute(annotation: Any) -> bool:
    if annotation is ComputedAttribute:
        return True
    # Unevaluated annotations are matched on their last dotted component.
    return isinstance(annotation, str) and annotation.strip().rsplit(".", 1)[-1] == "ComputedAttribute"
