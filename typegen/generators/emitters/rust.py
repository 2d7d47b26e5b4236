"""Rust struct emitter (serde)."""
from typing import List

from typegen.generators.inference import (
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    is_null_literal,
    collect_object_types,
    to_snake_case,
)
from typegen.generators.emitters.common import is_optional, join_declarations
from typegen.generators.options import RustOptions

PRIMITIVE_TYPES = {
    "string": "String",
    "number": "f64",
    "boolean": "bool",
}


def rust_type(descriptor: TypeDescriptor, options: RustOptions) -> str:
    """Map a descriptor to a Rust type."""
    if isinstance(descriptor, ArrayOf):
        return f"Vec<{rust_type(descriptor.item, options)}>"
    if isinstance(descriptor, ObjectOf):
        return f"Box<{descriptor.name}>" if options.use_box else descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        if is_null_literal(descriptor):
            return "Option<()>"
        return f"Option<{rust_type(descriptor.inner, options)}>"
    return "serde_json::Value"


def build_derives(options: RustOptions) -> List[str]:
    """Derive macros enabled by the options, in declaration order."""
    derives: List[str] = []
    if options.derive_serde:
        derives += ["Serialize", "Deserialize"]
    if options.derive_debug:
        derives.append("Debug")
    if options.derive_clone:
        derives.append("Clone")
    if options.derive_default:
        derives.append("Default")
    return derives


def _field_definition(field: Field, options: RustOptions) -> str:
    field_name = to_snake_case(field.name)
    optional = is_optional(field, options)
    field_type = rust_type(field.type, options)
    if optional:
        field_type = f"Option<{field_type}>"

    lines: List[str] = []
    if options.derive_serde:
        if field_name != field.name:
            lines.append(f'    #[serde(rename = "{field.name}")]')
        if optional:
            lines.append('    #[serde(skip_serializing_if = "Option::is_none")]')
    lines.append(f"    pub {field_name}: {field_type},")
    return "\n".join(lines)


def render_struct(obj: ObjectOf, options: RustOptions, derives: List[str]) -> str:
    """Generate a single Rust struct definition."""
    lines: List[str] = []
    if derives:
        lines.append(f"#[derive({', '.join(derives)})]")
    lines.append(f"pub struct {obj.name} {{")
    lines.extend(_field_definition(field, options) for field in obj.fields)
    lines.append("}")
    return "\n".join(lines)


def emit(root: TypeDescriptor, options: RustOptions) -> str:
    """Generate Rust structs for every object type under ``root``."""
    objects = collect_object_types(root)
    if not objects:
        return ""

    derives = build_derives(options)
    definitions = join_declarations(render_struct(obj, options, derives) for obj in objects)
    if options.derive_serde:
        return "use serde::{Deserialize, Serialize};\n\n" + definitions
    return definitions
