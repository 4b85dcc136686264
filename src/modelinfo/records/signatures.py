# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Method signature metadata of record classes.

Type information is reported as display names (``str``, ``datetime``,
``int | None``). Annotations that cannot be evaluated fall back to their
source text; anything unreadable degrades to ``None``.
"""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ParameterInfo:
    """A method parameter and the display name of its annotation."""

    name: str
    type: str | None = None


@dataclass(frozen=True)
class MethodInfo:
    """A method declared directly on a record class.

    Attributes:
        name: Method name.
        return_type: Display name of the return annotation, if any.
        parameters: Parameters in declaration order, including ``self``.
        is_static: Declared as ``staticmethod`` or ``classmethod``.
        is_abstract: Marked with ``abc.abstractmethod``.
    """

    name: str
    return_type: str | None = None
    parameters: tuple[ParameterInfo, ...] = field(default_factory=tuple)
    is_static: bool = False
    is_abstract: bool = False

    def parameter_type(self, name: str) -> str | None:
        """Return the annotation display name of parameter *name*, if declared."""
        for param in self.parameters:
            if param.name == name:
                return param.type
        return None


def declared_methods_of(cls: type) -> list[MethodInfo]:
    """Describe the methods declared in *cls*'s own body, in definition order.

    Inherited methods, properties and non-callable attributes are not reported.
    """
    methods: list[MethodInfo] = []
    for name, member in vars(cls).items():
        if isinstance(member, (staticmethod, classmethod)):
            methods.append(describe_method(name, member.__func__, is_static=True))
        elif inspect.isfunction(member):
            methods.append(describe_method(name, member))
    return methods


def describe_method(name: str, func: Any, *, is_static: bool = False) -> MethodInfo:
    """Build a :class:`MethodInfo` for *func*."""
    hints = _type_hints(func)
    raw = getattr(func, "__annotations__", {}) or {}

    parameters: list[ParameterInfo] = []
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        for param in signature.parameters.values():
            annotation = hints.get(param.name, raw.get(param.name))
            parameters.append(ParameterInfo(name=param.name, type=annotation_name(annotation)))

    return MethodInfo(
        name=name,
        return_type=annotation_name(hints.get("return", raw.get("return"))),
        parameters=tuple(parameters),
        is_static=is_static,
        is_abstract=bool(getattr(func, "__isabstractmethod__", False)),
    )


def return_annotation(func: Any) -> Any:
    """Return the evaluated return annotation of *func*, or its source text if it cannot be evaluated."""
    hints = _type_hints(func)
    if "return" in hints:
        return hints["return"]
    return (getattr(func, "__annotations__", {}) or {}).get("return")


def annotation_name(annotation: Any) -> str | None:
    """Return a display name for a type annotation, or ``None`` when absent."""
    if annotation is None or annotation is inspect.Parameter.empty:
        return None
    if isinstance(annotation, str):
        return annotation.strip() or None
    if annotation is type(None):
        return "None"
    if isinstance(annotation, list):
        return "[" + ", ".join(str(annotation_name(arg)) for arg in annotation) + "]"

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)
    if origin in (typing.Union, types.UnionType):
        return " | ".join(str(annotation_name(arg)) for arg in args)
    if origin is not None and args:
        return f"{annotation_name(origin)}[{', '.join(str(annotation_name(arg)) for arg in args)}]"
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


# ################
# Implementation
# ################


def _type_hints(func: Any) -> dict[str, Any]:
    """Evaluate annotations, returning an empty mapping when any of them cannot be resolved."""
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError, SyntaxError):
        return {}
