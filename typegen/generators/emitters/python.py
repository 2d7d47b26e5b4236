"""Python dataclass / TypedDict emitter."""
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
from typegen.generators.emitters.common import contains_unknown, is_optional, join_declarations
from typegen.generators.options import PythonOptions

PRIMITIVE_TYPES = {
    "string": "str",
    "number": "float",
    "boolean": "bool",
}


def python_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a Python type annotation."""
    if isinstance(descriptor, ArrayOf):
        return f"list[{python_type(descriptor.item)}]"
    if isinstance(descriptor, ObjectOf):
        # Forward reference, nested classes may be declared later
        return f"'{descriptor.name}'"
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        if is_null_literal(descriptor):
            return "None"
        return f"{python_type(descriptor.inner)} | None"
    return "Any"


def _with_none(annotation: str) -> str:
    if annotation == "None" or annotation.endswith(" | None"):
        return annotation
    return f"{annotation} | None"


def _dataclass_decorator(options: PythonOptions) -> str:
    parts = []
    if options.use_frozen:
        parts.append("frozen=True")
    if options.use_slots:
        parts.append("slots=True")
    if options.use_kw_only:
        parts.append("kw_only=True")
    return f"@dataclass({', '.join(parts)})" if parts else "@dataclass"


def _dataclass_field(field: Field, options: PythonOptions) -> str:
    annotation = python_type(field.type)
    if is_optional(field, options):
        return f"    {to_snake_case(field.name)}: {_with_none(annotation)} = None"
    return f"    {to_snake_case(field.name)}: {annotation}"


def render_dataclass(obj: ObjectOf, options: PythonOptions) -> str:
    """Generate a single dataclass definition."""
    lines = [_dataclass_decorator(options), f"class {obj.name}:"]
    lines.extend(_dataclass_field(field, options) for field in obj.fields)
    if not obj.fields:
        lines.append("    pass")
    return "\n".join(lines)


def _typeddict_field(field: Field, options: PythonOptions) -> str:
    annotation = python_type(field.type)
    if is_optional(field, options):
        annotation = f"NotRequired[{annotation}]"
    return f"    {field.name}: {annotation}"


def render_typeddict(obj: ObjectOf, options: PythonOptions) -> str:
    """Generate a single TypedDict definition."""
    total = "" if options.use_total else ", total=False"
    lines = [f"class {obj.name}(TypedDict{total}):"]
    lines.extend(_typeddict_field(field, options) for field in obj.fields)
    if not obj.fields:
        lines.append("    pass")
    return "\n".join(lines)


def _imports(objects: List[ObjectOf], options: PythonOptions) -> List[str]:
    needs_any = any(contains_unknown(f.type) for obj in objects for f in obj.fields)
    if options.style == "dataclass":
        imports = ["from dataclasses import dataclass"]
        if needs_any:
            imports.append("from typing import Any")
        return imports

    typing_names = ["TypedDict"]
    if needs_any:
        typing_names.insert(0, "Any")
    imports = [f"from typing import {', '.join(typing_names)}"]
    if any(is_optional(f, options) for obj in objects for f in obj.fields):
        imports.append("from typing import NotRequired")
    return imports


def emit(root: TypeDescriptor, options: PythonOptions) -> str:
    """Generate Python classes for every object type under ``root``."""
    objects = collect_object_types(root)
    if not objects:
        return ""

    render = render_dataclass if options.style == "dataclass" else render_typeddict
    definitions = join_declarations(render(obj, options) for obj in objects)
    return "\n".join(_imports(objects, options)) + "\n\n" + definitions
