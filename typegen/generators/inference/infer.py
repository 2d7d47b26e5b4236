"""Schema inference: JSON value -> TypeDescriptor."""
from typing import Any, Dict, List

from typegen.generators.inference.types import (
    BOOLEAN,
    NUMBER,
    STRING,
    UNKNOWN,
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    unwrap,
)
from typegen.generators.inference.utils import to_pascal_case


def infer_type(value: Any, name: str) -> TypeDescriptor:
    """
    Infer a type descriptor from a parsed JSON value.

    Objects keep their keys in enumeration order. Arrays are described by
    their first element only; an empty array yields ``ArrayOf(UNKNOWN)``.
    ``None`` yields ``Nullable(UNKNOWN)``.

    Args:
        value: Output of ``json.loads``
        name: Type name to give the value if it is an object

    Returns:
        The inferred descriptor
    """
    if value is None:
        return Nullable(UNKNOWN)

    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return Primitive(BOOLEAN)
    if isinstance(value, (int, float)):
        return Primitive(NUMBER)
    if isinstance(value, str):
        return Primitive(STRING)

    if isinstance(value, list):
        if not value:
            return ArrayOf(UNKNOWN)
        return ArrayOf(infer_type(value[0], f"{name}Item"))

    if isinstance(value, dict):
        fields = []
        for key, child in value.items():
            fields.append(Field(name=key, type=infer_type(child, to_pascal_case(key))))
        return ObjectOf(name=name, fields=tuple(fields))

    return UNKNOWN


def nesting_depth(value: Any) -> int:
    """Deepest chain of nested arrays/objects in ``value``; scalars are 0."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _collect_child_types(obj: ObjectOf) -> List[ObjectOf]:
    collected: List[ObjectOf] = []
    for field in obj.fields:
        nested = unwrap(field.type)
        if isinstance(nested, ObjectOf):
            collected.extend(_collect_child_types(nested))
            collected.append(nested)
    return collected


def collect_object_types(root: TypeDescriptor) -> List[ObjectOf]:
    """
    Collect every object type reachable from ``root``.

    Nested types come before the types that reference them and the root
    comes last. Types are de-duplicated by name, first occurrence wins.
    """
    root_object = unwrap(root)
    if not isinstance(root_object, ObjectOf):
        return []

    seen: Dict[str, ObjectOf] = {}
    for obj in _collect_child_types(root_object) + [root_object]:
        seen.setdefault(obj.name, obj)
    return list(seen.values())
