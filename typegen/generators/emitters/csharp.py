"""C# record / class emitter."""
from typing import List

from typegen.generators.inference import (
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    collect_object_types,
    to_pascal_case,
)
from typegen.generators.emitters.common import is_optional, join_declarations
from typegen.generators.options import CSharpOptions

PRIMITIVE_TYPES = {
    "string": "string",
    "number": "double",
    "boolean": "bool",
}


def csharp_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a C# type, without nullable annotations."""
    if isinstance(descriptor, ArrayOf):
        return f"List<{csharp_type(descriptor.item)}>"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        return csharp_type(descriptor.inner)
    return "object"


def _property_type(field: Field, options: CSharpOptions) -> str:
    base = csharp_type(field.type)
    nullable = is_optional(field, options) or isinstance(field.type, Nullable)
    if nullable and options.use_nullable_reference_types:
        return f"{base}?"
    return base


def _attributes(field: Field, prop_name: str, options: CSharpOptions, indent: str = "") -> List[str]:
    attributes: List[str] = []
    if options.use_system_text_json and prop_name != field.name:
        attributes.append(f'{indent}[JsonPropertyName("{field.name}")]')
    if options.use_newtonsoft and prop_name != field.name:
        attributes.append(f'{indent}[JsonProperty("{field.name}")]')
    if options.generate_data_contract:
        attributes.append(f'{indent}[DataMember(Name = "{field.name}")]')
    return attributes


def _record_parameter(field: Field, options: CSharpOptions) -> str:
    prop_name = to_pascal_case(field.name)
    attributes = _attributes(field, prop_name, options)
    prefix = " ".join(attributes) + " " if attributes else ""
    return f"    {prefix}{_property_type(field, options)} {prop_name}"


def render_record(obj: ObjectOf, options: CSharpOptions) -> str:
    """Generate a positional C# record."""
    contract = "[DataContract]\n" if options.generate_data_contract else ""
    parameters = ",\n".join(_record_parameter(f, options) for f in obj.fields)
    return f"{contract}public record {obj.name}(\n{parameters}\n);"


def _class_property(field: Field, options: CSharpOptions) -> str:
    prop_name = to_pascal_case(field.name)
    attributes = _attributes(field, prop_name, options, indent="    ")
    prefix = "\n".join(attributes) + "\n" if attributes else ""
    return f"{prefix}    public {_property_type(field, options)} {prop_name} {{ get; set; }}"


def render_class(obj: ObjectOf, options: CSharpOptions) -> str:
    """Generate a C# class with auto-properties."""
    contract = "[DataContract]\n" if options.generate_data_contract else ""
    properties = "\n\n".join(_class_property(f, options) for f in obj.fields)
    return f"{contract}public class {obj.name}\n{{\n{properties}\n}}"


def build_usings(options: CSharpOptions) -> List[str]:
    """Using directives and nullable context for the enabled features."""
    lines = ["using System.Collections.Generic;"]
    if options.use_system_text_json:
        lines.append("using System.Text.Json.Serialization;")
    if options.use_newtonsoft:
        lines.append("using Newtonsoft.Json;")
    if options.generate_data_contract:
        lines.append("using System.Runtime.Serialization;")
    if options.use_nullable_reference_types:
        lines += ["", "#nullable enable"]
    return lines


def emit(root: TypeDescriptor, options: CSharpOptions) -> str:
    """Generate C# types for every object type under ``root``."""
    objects = collect_object_types(root)
    if not objects:
        return ""

    render = render_record if options.use_records else render_class
    classes = join_declarations(render(obj, options) for obj in objects)
    return "\n".join(build_usings(options)) + "\n\n" + classes
