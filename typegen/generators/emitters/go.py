"""Go struct emitter."""
from typegen.generators.inference import (
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    is_null_literal,
    collect_object_types,
    to_pascal_case,
)
from typegen.generators.emitters.common import join_declarations
from typegen.generators.options import GoOptions

PRIMITIVE_TYPES = {
    "string": "string",
    "number": "float64",
    "boolean": "bool",
}


def go_type(descriptor: TypeDescriptor, options: GoOptions) -> str:
    """Map a descriptor to a Go type."""
    if isinstance(descriptor, ArrayOf):
        return f"[]{go_type(descriptor.item, options)}"
    if isinstance(descriptor, ObjectOf):
        return f"*{descriptor.name}" if options.use_pointers else descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable) and not is_null_literal(descriptor):
        inner = go_type(descriptor.inner, options)
        # Slices, pointers and interfaces already admit nil
        if inner.startswith(("*", "[]", "interface{}")):
            return inner
        return f"*{inner}"
    return "interface{}"


def _json_tag(key: str, options: GoOptions) -> str:
    if not options.use_json_tag:
        return ""
    tag_value = f"{key},omitempty" if options.omit_empty else key
    return f' `json:"{tag_value}"`'


def _field_definition(field: Field, options: GoOptions) -> str:
    return f"\t{to_pascal_case(field.name)} {go_type(field.type, options)}{_json_tag(field.name, options)}"


def render_struct(obj: ObjectOf, options: GoOptions) -> str:
    """Generate a single Go struct definition."""
    lines = [f"type {obj.name} struct {{"]
    lines.extend(_field_definition(field, options) for field in obj.fields)
    lines.append("}")
    return "\n".join(lines)


def emit(root: TypeDescriptor, options: GoOptions) -> str:
    """Generate Go structs for every object type under ``root``."""
    return join_declarations(render_struct(obj, options) for obj in collect_object_types(root))
