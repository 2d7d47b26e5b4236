"""TypeScript interface / type alias emitter."""
import re

from typegen.generators.inference import (
    ArrayOf,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    is_null_literal,
    collect_object_types,
)
from typegen.generators.emitters.common import is_optional, join_declarations
from typegen.generators.options import TypeScriptOptions

PRIMITIVE_TYPES = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
}


def ts_type(descriptor: TypeDescriptor, options: TypeScriptOptions) -> str:
    """Map a descriptor to a TypeScript type expression."""
    if isinstance(descriptor, ArrayOf):
        item = ts_type(descriptor.item, options)
        if isinstance(descriptor.item, Nullable) and " | " in item:
            item = f"({item})"
        return f"{item}[]"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        if is_null_literal(descriptor):
            return "null" if options.strict_null_checks else "any"
        inner = ts_type(descriptor.inner, options)
        return f"{inner} | null" if options.strict_null_checks else inner
    return "unknown"


def _property_name(key: str) -> str:
    # Quote keys that are not valid identifiers
    if re.fullmatch(r'[a-zA-Z_$][a-zA-Z0-9_$]*', key):
        return key
    escaped = key.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_type_definition(obj: ObjectOf, options: TypeScriptOptions) -> str:
    """Generate a single interface or type alias."""
    keyword = "interface" if options.use_interface else "type"
    export = "export " if options.use_export else ""
    assignment = "" if options.use_interface else " ="

    lines = [f"{export}{keyword} {obj.name}{assignment} {{"]
    for field in obj.fields:
        optional = is_optional(field, options)
        prop_type = ts_type(field.type, options)
        if optional and options.strict_null_checks:
            prop_type = f"{prop_type} | undefined"
        readonly = "readonly " if options.use_readonly else ""
        mark = "?" if optional else ""
        lines.append(f"  {readonly}{_property_name(field.name)}{mark}: {prop_type};")
    lines.append("}")
    return "\n".join(lines)


def emit(root: TypeDescriptor, options: TypeScriptOptions) -> str:
    """Generate TypeScript declarations for every object type under ``root``."""
    return join_declarations(
        render_type_definition(obj, options) for obj in collect_object_types(root)
    )
