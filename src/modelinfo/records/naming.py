# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming conventions for accessor and mutator methods.

An accessor for ``full_name`` may be spelled ``get_full_name_attribute`` or
``getFullNameAttribute``; a mutator uses the ``set`` prefix instead. Parsing a
method name yields the snake-cased attribute name it refers to.
"""

from __future__ import annotations

import re

# ###############
# Public Interface
# ###############


def snake(value: str) -> str:
    """Convert ``FullName`` or ``fullName`` to ``full_name``."""
    return _SNAKE_BOUNDARY_RE.sub(r"\1_", value).lower()


def studly(value: str) -> str:
    """Convert ``full_name`` to ``FullName``."""
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SEPARATOR_RE.split(value) if part)


def camel(value: str) -> str:
    """Convert ``full_name`` to ``fullName``."""
    s = studly(value)
    return s[:1].lower() + s[1:]


def accessor_method_names(key: str) -> tuple[str, str]:
    """Return the method names that define a get-accessor for *key*."""
    return f"get_{key}_attribute", f"get{studly(key)}Attribute"


def mutator_method_names(key: str) -> tuple[str, str]:
    """Return the method names that define a set-mutator for *key*."""
    return f"set_{key}_attribute", f"set{studly(key)}Attribute"


def parse_accessor_name(method_name: str) -> str | None:
    """Return the attribute name of an accessor method, or ``None`` if *method_name* is not one."""
    return _parse(method_name, _ACCESSOR_PATTERNS)


def parse_mutator_name(method_name: str) -> str | None:
    """Return the attribute name of a mutator method, or ``None`` if *method_name* is not one."""
    return _parse(method_name, _MUTATOR_PATTERNS)


# ################
# Implementation
# ################

_SNAKE_BOUNDARY_RE = re.compile(r"([^_])(?=[A-Z])")
_WORD_SEPARATOR_RE = re.compile(r"[_\-\s]+")

_ACCESSOR_PATTERNS = (
    re.compile(r"^get_(?P<name>.+?)_attribute$"),
    re.compile(r"^get(?P<name>[A-Z0-9].*?)Attribute$"),
)
_MUTATOR_PATTERNS = (
    re.compile(r"^set_(?P<name>.+?)_attribute$"),
    re.compile(r"^set(?P<name>[A-Z0-9].*?)Attribute$"),
)


def _parse(method_name: str, patterns: tuple[re.Pattern[str], ...]) -> str | None:
    for pattern in patterns:
        match = pattern.match(method_name)
        if match:
            return snake(match.group("name"))
    return None
