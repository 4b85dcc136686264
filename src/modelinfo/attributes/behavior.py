# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""How a record transforms the value of a column attribute."""

from __future__ import annotations

from modelinfo.model.attribute import TransformKind
from modelinfo.records.introspection import RecordIntrospection

# ###############
# Public Interface
# ###############


def resolve_transform(name: str, record: RecordIntrospection) -> tuple[TransformKind | None, str | None]:
    """Return the transform kind and cast label for the column attribute *name*.

    Accessor or mutator methods take precedence over a computed attribute
    method, which takes precedence over a cast rule.
    """
    if record.has_get_mutator(name) or record.has_set_mutator(name):
        return TransformKind.ACCESSOR, TransformKind.ACCESSOR.value

    if record.has_attribute_mutator(name):
        return TransformKind.ATTRIBUTE, TransformKind.ATTRIBUTE.value

    cast = casts_with_dates(record).get(name)
    if cast is not None:
        return TransformKind.CAST, cast

    return None, None


def casts_with_dates(record: RecordIntrospection) -> dict[str, str]:
    """Return the record's cast rules, with date attributes cast to ``datetime`` unless declared otherwise."""
    casts = {date: "datetime" for date in record.get_dates() if date is not None}
    casts.update(record.get_casts())
    return casts
