# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Whether an attribute is suppressed from a record's external representation."""

from __future__ import annotations

from modelinfo.records.introspection import RecordIntrospection

# ###############
# Public Interface
# ###############


def is_hidden(name: str, record: RecordIntrospection) -> bool:
    """Return True if *name* is hidden.

    A non-empty hidden list decides on its own; the visible list is only
    consulted when no attribute is explicitly hidden.
    """
    hidden = record.get_hidden()
    if hidden:
        return name in hidden

    visible = record.get_visible()
    if visible:
        return name not in visible

    return False
