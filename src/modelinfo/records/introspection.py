# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""The capabilities attribute resolution needs from a record type."""

from __future__ import annotations

import importlib
from typing import Any, Protocol, runtime_checkable

from modelinfo.records.base import Record
from modelinfo.records.signatures import MethodInfo

# ###############
# Public Interface
# ###############


class RecordResolutionError(Exception):
    """Raised when a record type cannot be located or instantiated."""


@runtime_checkable
class RecordIntrospection(Protocol):
    """Behavioral metadata of one record type.

    :class:`~modelinfo.records.base.Record` implements this protocol; other
    record implementations can be adapted by providing the same methods.
    """

    def get_table(self) -> str: ...

    def is_fillable(self, key: str) -> bool: ...

    def get_hidden(self) -> list[str]: ...

    def get_visible(self) -> list[str]: ...

    def get_casts(self) -> dict[str, str]: ...

    def get_dates(self) -> list[str | None]: ...

    def has_get_mutator(self, key: str) -> bool: ...

    def has_set_mutator(self, key: str) -> bool: ...

    def has_attribute_mutator(self, key: str) -> bool: ...

    def has_appended(self, key: str) -> bool: ...

    def get_attributes(self) -> dict[str, Any]: ...

    def declared_methods(self) -> list[MethodInfo]: ...


def resolve_record(target: Record | type[Record] | str) -> Record:
    """Return a record instance for *target*.

    Args:
        target: A record instance (returned unchanged), a record class
            (instantiated without arguments), or an import string in the form
            ``package.module:ClassName`` or ``package.module.ClassName``.

    Raises:
        RecordResolutionError: If the import string cannot be resolved, or the
            target is not a :class:`Record`.
    """
    if isinstance(target, Record):
        return target
    if isinstance(target, str):
        target = _import_record_class(target)
    if not (isinstance(target, type) and issubclass(target, Record)):
        raise RecordResolutionError(f"{target!r} is not a Record type")
    return target()


# ################
# Implementation
# ################


def _import_record_class(path: str) -> Any:
    """Import the object named by ``module:attr`` or ``module.attr``."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise RecordResolutionError(f"Invalid record path '{path}': expected 'module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RecordResolutionError(f"Cannot import module '{module_name}': {exc}") from exc

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise RecordResolutionError(f"Module '{module_name}' has no attribute '{attr}'") from None
    return obj
