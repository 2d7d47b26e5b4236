"""Swift Codable struct / class emitter."""
from typegen.generators.inference import (
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    collect_object_types,
    to_camel_case,
)
from typegen.generators.emitters.common import is_optional, join_declarations
from typegen.generators.options import SwiftOptions

PRIMITIVE_TYPES = {
    "string": "String",
    "number": "Double",
    "boolean": "Bool",
}


def swift_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a Swift type."""
    if isinstance(descriptor, ArrayOf):
        return f"[{swift_type(descriptor.item)}]"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        return f"{swift_type(descriptor.inner)}?"
    return "Any"


def _property(field: Field, options: SwiftOptions) -> str:
    prop_type = swift_type(field.type)
    optional = is_optional(field, options) or options.use_optional_properties
    if optional and not prop_type.endswith("?"):
        prop_type = f"{prop_type}?"
    return f"    let {to_camel_case(field.name)}: {prop_type}"


def _coding_keys(obj: ObjectOf, options: SwiftOptions) -> str:
    if not options.use_coding_keys:
        return ""
    if all(to_camel_case(f.name) == f.name for f in obj.fields):
        return ""

    cases = []
    for field in obj.fields:
        prop_name = to_camel_case(field.name)
        if prop_name != field.name:
            cases.append(f'        case {prop_name} = "{field.name}"')
        else:
            cases.append(f"        case {prop_name}")
    return "\n\n    enum CodingKeys: String, CodingKey {\n" + "\n".join(cases) + "\n    }"


def render_type(obj: ObjectOf, options: SwiftOptions) -> str:
    """Generate a single Swift struct or class."""
    keyword = "struct" if options.use_struct else "class"
    conformance = "Codable" if options.use_struct else "Codable, Equatable"
    properties = "\n".join(_property(f, options) for f in obj.fields)
    return f"{keyword} {obj.name}: {conformance} {{\n{properties}{_coding_keys(obj, options)}\n}}"


def emit(root: TypeDescriptor, options: SwiftOptions) -> str:
    """Generate Swift types for every object type under ``root``."""
    return join_declarations(render_type(obj, options) for obj in collect_object_types(root))
