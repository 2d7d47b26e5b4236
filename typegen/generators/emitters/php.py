"""PHP class emitter."""
from typing import List

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
from typegen.generators.options import PhpOptions

PRIMITIVE_TYPES = {
    "string": "string",
    "number": "float",
    "boolean": "bool",
}


def php_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a PHP type declaration."""
    if isinstance(descriptor, ArrayOf):
        return "array"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        return _nullable(php_type(descriptor.inner))
    return "mixed"


def _nullable(type_name: str) -> str:
    # mixed already includes null and cannot take the ? prefix
    if type_name == "mixed" or type_name.startswith("?"):
        return type_name
    return f"?{type_name}"


def _property_type(field: Field, options: PhpOptions) -> str:
    base = php_type(field.type)
    return _nullable(base) if is_optional(field, options) else base


def render_promoted_class(obj: ObjectOf, options: PhpOptions) -> str:
    """Generate a class using constructor property promotion (PHP 8.0+)."""
    readonly = "readonly " if options.use_readonly_properties else ""
    params = [
        f"        public {readonly}{_property_type(f, options)} ${to_camel_case(f.name)}"
        for f in obj.fields
    ]
    return (
        f"class {obj.name}\n{{\n    public function __construct(\n"
        + ",\n".join(params)
        + "\n    ) {}\n}"
    )


def render_traditional_class(obj: ObjectOf, options: PhpOptions) -> str:
    """Generate a class with declared properties and an assigning constructor."""
    readonly = "readonly " if options.use_readonly_properties else ""
    properties = [
        f"    public {readonly}{_property_type(f, options)} ${to_camel_case(f.name)};"
        for f in obj.fields
    ]
    params = [f"{_property_type(f, options)} ${to_camel_case(f.name)}" for f in obj.fields]
    assignments = [
        f"        $this->{to_camel_case(f.name)} = ${to_camel_case(f.name)};" for f in obj.fields
    ]
    constructor = (
        "    public function __construct(\n        "
        + ",\n        ".join(params)
        + "\n    ) {\n"
        + "\n".join(assignments)
        + "\n    }"
    )
    return f"class {obj.name}\n{{\n" + "\n".join(properties) + f"\n\n{constructor}\n}}"


def build_header(options: PhpOptions) -> List[str]:
    """Opening tag, strict types declaration and namespace."""
    header = ["<?php"]
    if options.use_strict_types:
        header += ["", "declare(strict_types=1);"]
    if options.namespace:
        header += ["", f"namespace {options.namespace};"]
    return header


def emit(root: TypeDescriptor, options: PhpOptions) -> str:
    """Generate PHP classes for every object type under ``root``."""
    objects = collect_object_types(root)
    if not objects:
        return ""

    render = render_promoted_class if options.use_constructor_promotion else render_traditional_class
    classes = join_declarations(render(obj, options) for obj in objects)
    return "\n".join(build_header(options)) + "\n\n" + classes
