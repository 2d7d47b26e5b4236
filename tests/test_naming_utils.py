"""Tests for naming utilities."""
import pytest
from typegen.generators.inference import (
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)


@pytest.mark.parametrize("name,expected", [
    ("user_name", "UserName"),
    ("line-items", "LineItems"),
    ("userName", "UserName"),
    ("id", "Id"),
    ("", ""),
])
def test_to_pascal_case(name, expected):
    assert to_pascal_case(name) == expected


@pytest.mark.parametrize("name,expected", [
    ("user_name", "userName"),
    ("first-name", "firstName"),
    ("UserName", "userName"),
    ("id", "id"),
])
def test_to_camel_case(name, expected):
    assert to_camel_case(name) == expected


@pytest.mark.parametrize("name,expected", [
    ("userName", "user_name"),
    ("UserName", "user_name"),
    ("first-name", "first_name"),
    ("already_snake", "already_snake"),
    ("userID", "user_id"),
])
def test_to_snake_case(name, expected):
    assert to_snake_case(name) == expected
