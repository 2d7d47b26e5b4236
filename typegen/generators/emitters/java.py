"""Java emitter: records, POJOs, Lombok classes and Immutables interfaces."""
from typing import Callable, Dict, List

from typegen.generators.inference import (
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    collect_object_types,
    to_camel_case,
    to_pascal_case,
)
from typegen.generators.emitters.common import is_optional, join_declarations
from typegen.generators.options import JavaOptions

PRIMITIVE_TYPES = {
    "string": "String",
    "number": "double",
    "boolean": "boolean",
}

BOXED_TYPES = {
    "int": "Integer",
    "long": "Long",
    "double": "Double",
    "float": "Float",
    "boolean": "Boolean",
    "byte": "Byte",
    "short": "Short",
    "char": "Character",
}

FIELD_ANNOTATIONS = {
    "jackson": '@JsonProperty("{key}")',
    "gson": '@SerializedName("{key}")',
    "moshi": '@Json(name = "{key}")',
}

SERIALIZATION_IMPORTS = {
    "jackson": "import com.fasterxml.jackson.annotation.JsonProperty;",
    "gson": "import com.google.gson.annotations.SerializedName;",
    "moshi": "import com.squareup.moshi.Json;",
}


def java_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a Java type."""
    if isinstance(descriptor, ArrayOf):
        return f"List<{boxed_type(descriptor.item)}>"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_TYPES[descriptor.kind]
    if isinstance(descriptor, Nullable):
        # Only reference types can hold null
        return boxed_type(descriptor.inner)
    return "Object"


def boxed_type(descriptor: TypeDescriptor) -> str:
    """Java type usable as a generic argument."""
    type_name = java_type(descriptor)
    return BOXED_TYPES.get(type_name, type_name)


def _field_annotation(field: Field, options: JavaOptions) -> str:
    if to_camel_case(field.name) == field.name or options.serialization_library == "none":
        return ""
    return f"    {FIELD_ANNOTATIONS[options.serialization_library].format(key=field.name)}\n"


def _validation_annotation(field: Field, options: JavaOptions) -> str:
    if not options.use_validation:
        return ""
    if isinstance(field.type, Primitive) and field.type.kind == "string":
        return "    @NotBlank\n"
    if isinstance(field.type, (ArrayOf, ObjectOf)):
        return "    @NotNull\n"
    return ""


def _field_type(field: Field, options: JavaOptions) -> str:
    if options.use_optional and is_optional(field, options):
        return f"Optional<{boxed_type(field.type)}>"
    return java_type(field.type)


def render_record(obj: ObjectOf, options: JavaOptions) -> str:
    """Generate a Java record."""
    components = [
        f"{_field_annotation(f, options)}    {_field_type(f, options)} {to_camel_case(f.name)}"
        for f in obj.fields
    ]
    return f"public record {obj.name}(\n" + ",\n".join(components) + "\n) {}"


def _private_field(field: Field, options: JavaOptions) -> str:
    annotations = _field_annotation(field, options) + _validation_annotation(field, options)
    return f"{annotations}    private {_field_type(field, options)} {to_camel_case(field.name)};"


def render_lombok(obj: ObjectOf, options: JavaOptions) -> str:
    """Generate a Lombok ``@Data`` class."""
    annotations = ["@Data"]
    if options.generate_builder:
        annotations.append("@Builder")
    annotations += ["@NoArgsConstructor", "@AllArgsConstructor"]

    fields = [_private_field(f, options) for f in obj.fields]
    return "\n".join(annotations) + f"\npublic class {obj.name} {{\n" + "\n\n".join(fields) + "\n}"


def render_immutables(obj: ObjectOf, options: JavaOptions) -> str:
    """Generate an Immutables ``@Value.Immutable`` interface."""
    methods = [
        f"{_field_annotation(f, options)}    {_field_type(f, options)} {to_camel_case(f.name)}();"
        for f in obj.fields
    ]
    return f"@Value.Immutable\npublic interface {obj.name} {{\n" + "\n\n".join(methods) + "\n}"


def _equals_hash_code(type_name: str, field_names: List[str]) -> List[str]:
    comparisons = " &&\n               ".join(f"Objects.equals({f}, that.{f})" for f in field_names)
    equals_method = "\n".join([
        "    @Override",
        "    public boolean equals(Object o) {",
        "        if (this == o) return true;",
        "        if (o == null || getClass() != o.getClass()) return false;",
        f"        {type_name} that = ({type_name}) o;",
        f"        return {comparisons or 'true'};",
        "    }",
    ])
    hash_code_method = "\n".join([
        "    @Override",
        "    public int hashCode() {",
        f"        return Objects.hash({', '.join(field_names)});",
        "    }",
    ])
    return ["", equals_method, hash_code_method]


def _accessors(field: Field, options: JavaOptions) -> List[str]:
    field_name = to_camel_case(field.name)
    field_type = _field_type(field, options)
    capitalized = to_pascal_case(field_name)
    getter = (
        f"    public {field_type} get{capitalized}() {{\n"
        f"        return {field_name};\n"
        "    }"
    )
    setter = (
        f"    public void set{capitalized}({field_type} {field_name}) {{\n"
        f"        this.{field_name} = {field_name};\n"
        "    }"
    )
    return [getter, setter]


def render_pojo(obj: ObjectOf, options: JavaOptions) -> str:
    """Generate a JavaBean with getters, setters and optional equals/hashCode."""
    members = [_private_field(f, options) for f in obj.fields]
    members.append("")
    for field in obj.fields:
        members.extend(_accessors(field, options))
    if options.generate_equals:
        members.extend(_equals_hash_code(obj.name, [to_camel_case(f.name) for f in obj.fields]))
    return f"public class {obj.name} {{\n" + "\n".join(members) + "\n}"


CLASS_RENDERERS: Dict[str, Callable[[ObjectOf, JavaOptions], str]] = {
    "record": render_record,
    "pojo": render_pojo,
    "lombok": render_lombok,
    "immutables": render_immutables,
}


def build_imports(options: JavaOptions) -> List[str]:
    """Package declaration and imports for the enabled features."""
    lines: List[str] = []
    if options.package_name:
        lines += [f"package {options.package_name};", ""]
    lines.append("import java.util.List;")
    if options.use_optional and options.optional_properties:
        lines.append("import java.util.Optional;")
    if options.generate_equals and options.class_style == "pojo":
        lines.append("import java.util.Objects;")
    if options.serialization_library in SERIALIZATION_IMPORTS:
        lines.append(SERIALIZATION_IMPORTS[options.serialization_library])
    if options.class_style == "lombok":
        lines += [
            "import lombok.Data;",
            "import lombok.NoArgsConstructor;",
            "import lombok.AllArgsConstructor;",
        ]
        if options.generate_builder:
            lines.append("import lombok.Builder;")
    if options.class_style == "immutables":
        lines.append("import org.immutables.value.Value;")
    if options.use_validation:
        lines += [
            "import javax.validation.constraints.NotNull;",
            "import javax.validation.constraints.NotBlank;",
        ]
    return lines


def emit(root: TypeDescriptor, options: JavaOptions) -> str:
    """Generate Java types for every object type under ``root``."""
    objects = collect_object_types(root)
    if not objects:
        return ""

    render = CLASS_RENDERERS[options.class_style]
    classes = join_declarations(render(obj, options) for obj in objects)
    return "\n".join(build_imports(options)) + "\n\n" + classes
