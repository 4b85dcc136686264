# Copyright 2026 ModelInfo Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for accessor and mutator naming conventions."""

import pytest

from modelinfo.records import (
    accessor_method_names,
    camel,
    mutator_method_names,
    parse_accessor_name,
    parse_mutator_name,
    snake,
    studly,
)

# ###############
# Case conversion
# ###############


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("FullName", "full_name"),
        ("fullName", "full_name"),
        ("full_name", "full_name"),
        ("Name", "name"),
        ("IsAdmin2", "is_admin2"),
    ],
)
def test_snake(value: str, expected: str) -> None:
    """Camel and studly names are snake-cased; snake names are unchanged."""
    assert snake(value) == expected


def test_studly_and_camel() -> None:
    """Snake names convert to studly and camel case."""
    assert studly("full_name") == "FullName"
    assert camel("full_name") == "fullName"
    assert camel("name") == "name"


def test_method_names_for_key() -> None:
    """Both spellings are produced for accessors and mutators."""
    assert accessor_method_names("full_name") == ("get_full_name_attribute", "getFullNameAttribute")
    assert mutator_method_names("full_name") == ("set_full_name_attribute", "setFullNameAttribute")


# ###############
# Parsing
# ###############


@pytest.mark.parametrize(
    ("method_name", "expected"),
    [
        ("get_full_name_attribute", "full_name"),
        ("getFullNameAttribute", "full_name"),
        ("get_x_attribute", "x"),
        ("getAttribute", None),
        ("get_attribute", None),
        ("get_attributes", None),
        ("get_full_name", None),
        ("set_full_name_attribute", None),
        ("getterAttribute", None),
    ],
)
def test_parse_accessor_name(method_name: str, expected: str | None) -> None:
    """Only accessor-shaped method names yield an attribute name."""
    assert parse_accessor_name(method_name) == expected


@pytest.mark.parametrize(
    ("method_name", "expected"),
    [
        ("set_password_attribute", "password"),
        ("setPasswordHashAttribute", "password_hash"),
        ("setAttribute", None),
        ("get_password_attribute", None),
        ("setup", None),
    ],
)
def test_parse_mutator_name(method_name: str, expected: str | None) -> None:
    """Only mutator-shaped method names yield an attribute name."""
    assert parse_mutator_name(method_name) == expected
