"""Immutable type descriptors inferred from JSON samples."""
from dataclasses import dataclass
from typing import Tuple, Union


STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"


@dataclass(frozen=True)
class Primitive:
    """A JSON scalar: string, number or boolean."""
    kind: str


@dataclass(frozen=True)
class ArrayOf:
    """A JSON array described by the type of its first element."""
    item: "TypeDescriptor"


@dataclass(frozen=True)
class Field:
    """One member of an object type, in first-seen key order."""
    name: str  # Original JSON key
    type: "TypeDescriptor"
    optional: bool = False


@dataclass(frozen=True)
class ObjectOf:
    """A JSON object; ``name`` is the declaration name emitters print."""
    name: str
    fields: Tuple[Field, ...]


@dataclass(frozen=True)
class Nullable:
    """A value that may be null."""
    inner: "TypeDescriptor"


@dataclass(frozen=True)
class Unknown:
    """Placeholder for a shape the sample gives no evidence about."""


UNKNOWN = Unknown()

TypeDescriptor = Union[Primitive, ArrayOf, ObjectOf, Nullable, Unknown]


def unwrap(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Strip ArrayOf and Nullable wrappers down to the element type."""
    while isinstance(descriptor, (ArrayOf, Nullable)):
        descriptor = descriptor.item if isinstance(descriptor, ArrayOf) else descriptor.inner
    return descriptor


def is_null_literal(descriptor: TypeDescriptor) -> bool:
    """True for the descriptor inferred from a bare JSON null."""
    return isinstance(descriptor, Nullable) and isinstance(descriptor.inner, Unknown)
