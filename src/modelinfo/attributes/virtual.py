# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of virtual attributes: attributes without a backing column.

A record defines a virtual attribute through methods declared on its own
class:

- ``get_<name>_attribute`` / ``get<Name>Attribute``: an accessor. Its return
  annotation becomes the attribute's semantic type.
- ``set_<name>_attribute`` / ``set<Name>Attribute``: a mutator. The annotation
  of its ``value`` parameter becomes the attribute's semantic type.
- a method returning :class:`~modelinfo.records.base.ComputedAttribute`: a
  computed attribute named after the method.

Discovery runs in two passes. The first collects candidates in method
definition order and drops those whose name is taken by a column. The second
groups candidates by name and collapses each group made of exactly one
accessor and one mutator into a single computed attribute. Groups of any
other shape are kept as they are, so three or more methods for one name yield
several descriptors sharing that name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from modelinfo.attributes.visibility import is_hidden
from modelinfo.model.attribute import Attribute, TransformKind
from modelinfo.records.introspection import RecordIntrospection
from modelinfo.records.naming import parse_accessor_name, parse_mutator_name, snake
from modelinfo.records.signatures import MethodInfo

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def virtual_attributes(record: RecordIntrospection, column_names: Iterable[str]) -> list[Attribute]:
    """Return descriptors for the record's virtual attributes, in discovery order.

    Args:
        record: The record type's behavioral metadata.
        column_names: Names of the columns of the record's table. Candidates
            with one of these names are discarded.

    Returns:
        Virtual attribute descriptors, accessor/mutator pairs collapsed.
    """
    taken = set(column_names)
    attributes: list[Attribute] = []
    for candidate in _candidates(record):
        if not candidate.name:
            continue
        if candidate.name in taken:
            logger.debug("Skipping virtual attribute '%s': a column of the same name exists", candidate.name)
            continue
        attributes.append(_to_attribute(candidate, record))
    return collapse_accessor_mutator_pairs(attributes)


def classify_method(method: MethodInfo, record: RecordIntrospection) -> VirtualCandidate | None:
    """Return the virtual attribute candidate a method defines, if any."""
    name = parse_accessor_name(method.name)
    if name is not None:
        return VirtualCandidate(name=name, kind=TransformKind.ACCESSOR, semantic_type=method.return_type)

    name = parse_mutator_name(method.name)
    if name is not None:
        return VirtualCandidate(name=name, kind=TransformKind.MUTATOR, semantic_type=method.parameter_type("value"))

    if record.has_attribute_mutator(method.name):
        return VirtualCandidate(name=snake(method.name), kind=TransformKind.ATTRIBUTE)

    return None


def collapse_accessor_mutator_pairs(attributes: list[Attribute]) -> list[Attribute]:
    """Group attributes by name and merge each accessor+mutator pair into one computed attribute.

    Groups are emitted in order of their first member. Only groups of exactly
    two members, one accessor and one mutator, are merged; the accessor's
    semantic type wins over the mutator's.
    """
    groups: dict[str, list[Attribute]] = {}
    for attribute in attributes:
        groups.setdefault(attribute.name, []).append(attribute)

    result: list[Attribute] = []
    for name, items in groups.items():
        accessor = _first_of_kind(items, TransformKind.ACCESSOR)
        mutator = _first_of_kind(items, TransformKind.MUTATOR)
        if len(items) != 2 or accessor is None or mutator is None:
            result.extend(items)
            continue

        logger.debug("Merging accessor and mutator of '%s' into a computed attribute", name)
        result.append(
            accessor.model_copy(
                update={
                    "semantic_type": accessor.semantic_type or mutator.semantic_type,
                    "transform_kind": TransformKind.ATTRIBUTE,
                    "cast": TransformKind.ATTRIBUTE.value,
                }
            )
        )
    return result


@dataclass(frozen=True)
class VirtualCandidate:
    """A virtual attribute suggested by one method."""

    name: str
    kind: TransformKind
    semantic_type: str | None = None


# ################
# Implementation
# ################


def _candidates(record: RecordIntrospection) -> list[VirtualCandidate]:
    candidates: list[VirtualCandidate] = []
    for method in record.declared_methods():
        if method.is_static or method.is_abstract:
            continue
        candidate = classify_method(method, record)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def _to_attribute(candidate: VirtualCandidate, record: RecordIntrospection) -> Attribute:
    return Attribute(
        name=candidate.name,
        semantic_type=candidate.semantic_type,
        storage_type=None,
        auto_increment=False,
        nullable=None,
        default=None,
        primary=None,
        unique=None,
        fillable=record.is_fillable(candidate.name),
        appended=record.has_appended(candidate.name),
        transform_kind=candidate.kind,
        cast=candidate.kind.value,
        virtual=True,
        hidden=is_hidden(candidate.name, record),
    )


def _first_of_kind(items: list[Attribute], kind: TransformKind) -> Attribute | None:
    return next((item for item in items if item.transform_kind is kind), None)
