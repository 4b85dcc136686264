# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Record types: declarative behavior, naming conventions and introspection."""

from modelinfo.records.base import ComputedAttribute, MassAssignmentError, Record
from modelinfo.records.introspection import RecordIntrospection, RecordResolutionError, resolve_record
from modelinfo.records.naming import (
    accessor_method_names,
    camel,
    mutator_method_names,
    parse_accessor_name,
    parse_mutator_name,
    snake,
    studly,
)
from modelinfo.records.signatures import MethodInfo, ParameterInfo, annotation_name, declared_methods_of

__all__ = [
    # Records
    "ComputedAttribute",
    "MassAssignmentError",
    "Record",
    # Introspection
    "MethodInfo",
    "ParameterInfo",
    "RecordIntrospection",
    "RecordResolutionError",
    "annotation_name",
    "declared_methods_of",
    "resolve_record",
    # Naming
    "accessor_method_names",
    "camel",
    "mutator_method_names",
    "parse_accessor_name",
    "parse_mutator_name",
    "snake",
    "studly",
]
