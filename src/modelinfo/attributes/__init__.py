# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Attribute resolution: schema facts merged with record behavior."""

from modelinfo.attributes.behavior import casts_with_dates, resolve_transform
from modelinfo.attributes.finder import AttributeFinder, find_attributes
from modelinfo.attributes.indexes import column_indexes, is_primary, is_unique
from modelinfo.attributes.inference import ScalarKind, column_semantic_type, infer_semantic_type
from modelinfo.attributes.virtual import (
    VirtualCandidate,
    classify_method,
    collapse_accessor_mutator_pairs,
    virtual_attributes,
)
from modelinfo.attributes.visibility import is_hidden

__all__ = [
    # Resolution
    "AttributeFinder",
    "find_attributes",
    # Type inference
    "ScalarKind",
    "column_semantic_type",
    "infer_semantic_type",
    # Indexes
    "column_indexes",
    "is_primary",
    "is_unique",
    # Visibility
    "is_hidden",
    # Behavior
    "casts_with_dates",
    "resolve_transform",
    # Virtual attributes
    "VirtualCandidate",
    "classify_method",
    "collapse_accessor_mutator_pairs",
    "virtual_attributes",
]
