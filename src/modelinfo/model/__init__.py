# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value objects describing record attributes and table schemas."""

from modelinfo.model.attribute import Attribute, TransformKind
from modelinfo.model.schema import ColumnInfo, IndexInfo
from modelinfo.model.values import DefaultValue, EnumValue, RawValue, classify, unwrap

__all__ = [
    # Attributes
    "Attribute",
    "TransformKind",
    # Schema
    "ColumnInfo",
    "IndexInfo",
    # Default values
    "DefaultValue",
    "EnumValue",
    "RawValue",
    "classify",
    "unwrap",
]
