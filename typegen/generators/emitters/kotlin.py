"""Kotlin (data) class emitter."""
from typing import List, Optional

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
from typegen.generators.options import KotlinOptions

PRIMITIVE_TYPES = {
    "string": "String",
    "number": "Double",
    "boolean": "Boolean",
}

PRIMITIVE_DEFAULTS = {
    "string": '""',
    "number": "0.0",
    "boolean": "false",
}

SERIALIZATION_ANNOTATIONS = {
    "kotlinx": '@SerialName("{key}")',
    "gson": '@SerializedName("{key}")',
    "moshi": '@Json(name = "{key}")',
    "jackson": '@JsonProperty("{key}")',
}

SERIALIZATION_IMPORTS = {
    "kotlinx": [
        "import kotlinx.serialization.Serializable",
        "import kotlinx.serialization.SerialName",
    ],
    "gson": ["import com.google.gson.annotations.SerializedName"],
    "moshi": ["import com.squareup.moshi.Json"],
    "jackson": ["import com.fasterxml.jackson.annotation.JsonProperty"],
}


def kotlin_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a Kotlin type."""
    if isinstance(descriptor, ArrayOf):
        return f"List<{kotlin_type(descriptor.item)}>"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        return f"{kotlin_type(descriptor.inner)}?"
    return "Any"


def _default_value(descriptor: TypeDescriptor) -> str:
    if isinstance(descriptor, ArrayOf):
        return "emptyList()"
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_DEFAULTS[descriptor.kind]
    return "null"


def _annotation(field: Field, prop_name: str, options: KotlinOptions) -> Optional[str]:
    if prop_name == field.name or options.serialization_library not in SERIALIZATION_ANNOTATIONS:
        return None
    return SERIALIZATION_ANNOTATIONS[options.serialization_library].format(key=field.name)


def _property(field: Field, options: KotlinOptions) -> str:
    prop_name = to_camel_case(field.name)
    prop_type = kotlin_type(field.type)
    if is_optional(field, options) and not prop_type.endswith("?"):
        prop_type = f"{prop_type}?"

    annotation = _annotation(field, prop_name, options)
    prefix = f"{annotation}\n    " if annotation else ""
    default = f" = {_default_value(field.type)}" if options.use_default_values else ""
    return f"{prefix}val {prop_name}: {prop_type}{default}"


def render_class(obj: ObjectOf, options: KotlinOptions) -> str:
    """Generate a single Kotlin class."""
    header = "@Serializable\n" if options.serialization_library == "kotlinx" else ""
    keyword = "data class" if options.use_data_class else "class"
    properties = ",\n    ".join(_property(f, options) for f in obj.fields)
    return f"{header}{keyword} {obj.name}(\n    {properties}\n)"


def emit(root: TypeDescriptor, options: KotlinOptions) -> str:
    """Generate Kotlin classes for every object type under ``root``."""
    classes = join_declarations(render_class(obj, options) for obj in collect_object_types(root))
    if not classes:
        return ""

    imports: List[str] = SERIALIZATION_IMPORTS.get(options.serialization_library, [])
    if imports:
        return "\n".join(imports) + "\n\n" + classes
    return classes
