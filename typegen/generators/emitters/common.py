"""Helpers shared by the language emitters."""
from typing import Iterable

from typegen.generators.inference import ArrayOf, Field, Nullable, TypeDescriptor, Unknown, is_null_literal
from typegen.generators.options import BaseGeneratorOptions


def is_optional(field: Field, options: BaseGeneratorOptions) -> bool:
    """A field is optional if inference marked it so or the options force it."""
    return field.optional or options.optional_properties


def join_declarations(declarations: Iterable[str]) -> str:
    """Join non-empty declarations with one blank line between them."""
    return "\n\n".join(d for d in declarations if d)


def contains_unknown(descriptor: TypeDescriptor) -> bool:
    """True if printing ``descriptor`` needs the language's catch-all type."""
    if isinstance(descriptor, Unknown):
        return True
    if isinstance(descriptor, ArrayOf):
        return contains_unknown(descriptor.item)
    if isinstance(descriptor, Nullable):
        # Nullable(UNKNOWN) prints as the null type, not the catch-all
        return not is_null_literal(descriptor) and contains_unknown(descriptor.inner)
    return False
