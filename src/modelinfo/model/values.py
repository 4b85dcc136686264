# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Default values of record attributes, with enumeration members unwrapped."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class RawValue:
    """A plain value, reported as-is."""

    value: Any


@dataclass(frozen=True)
class EnumValue:
    """An enumeration member.

    Attributes:
        name: The member name.
        underlying: The member's scalar value, or ``None`` when the member is
            not backed by a scalar.
    """

    name: str
    underlying: Any = None


DefaultValue = RawValue | EnumValue


def classify(value: Any) -> DefaultValue:
    """Wrap *value* into the matching default value variant."""
    if isinstance(value, Enum):
        underlying = value.value if isinstance(value.value, _SCALARS) else None
        return EnumValue(name=value.name, underlying=underlying)
    return RawValue(value)


def unwrap(default: DefaultValue) -> Any:
    """Return the scalar representation of a default value.

    Scalar-backed enumeration members unwrap to their value, other members to
    their name.
    """
    if isinstance(default, EnumValue):
        return default.underlying if default.underlying is not None else default.name
    return default.value


# ################
# Implementation
# ################

_SCALARS = (str, int, float, bool)
