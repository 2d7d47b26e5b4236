"""Naming utilities shared by all emitters."""
import re


def to_pascal_case(name: str) -> str:
    """Convert snake_case, kebab-case or camelCase to PascalCase."""
    s1 = re.sub(r'[-_](.)', lambda m: m.group(1).upper(), name)
    return s1[:1].upper() + s1[1:]


def to_camel_case(name: str) -> str:
    """Convert snake_case, kebab-case or PascalCase to camelCase."""
    s1 = re.sub(r'[-_](.)', lambda m: m.group(1).upper(), name)
    return s1[:1].lower() + s1[1:]


def to_snake_case(name: str) -> str:
    """Convert PascalCase, camelCase or kebab-case to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1)
    return s2.replace('-', '_').lower()
