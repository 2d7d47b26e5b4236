"""JavaScript class / object template emitter with JSDoc."""
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
    to_camel_case,
)
from typegen.generators.emitters.common import join_declarations
from typegen.generators.options import JavaScriptOptions

PRIMITIVE_DEFAULTS = {
    "string": "''",
    "number": "0",
    "boolean": "false",
}


def jsdoc_type(descriptor: TypeDescriptor) -> str:
    """Map a descriptor to a JSDoc type expression."""
    if isinstance(descriptor, ArrayOf):
        return f"Array<{jsdoc_type(descriptor.item)}>"
    if isinstance(descriptor, ObjectOf):
        return descriptor.name
    if isinstance(descriptor, Primitive):
        return descriptor.kind
    if isinstance(descriptor, Nullable):
        if is_null_literal(descriptor):
            return "null"
        return f"?{jsdoc_type(descriptor.inner)}"
    return "*"


def _default_value(descriptor: TypeDescriptor) -> str:
    if isinstance(descriptor, ArrayOf):
        return "[]"
    if isinstance(descriptor, Primitive):
        return PRIMITIVE_DEFAULTS[descriptor.kind]
    return "null"


def _property_docs(fields) -> List[str]:
    return [f" * @property {{{jsdoc_type(f.type)}}} {to_camel_case(f.name)}" for f in fields]


def _validator_check(field: Field) -> str:
    prop = to_camel_case(field.name)
    descriptor = field.type
    if isinstance(descriptor, ArrayOf):
        return f"  if (!Array.isArray(obj.{prop})) return false;"
    if isinstance(descriptor, ObjectOf):
        return f"  if (typeof obj.{prop} !== 'object' || obj.{prop} === null) return false;"
    if isinstance(descriptor, Primitive):
        return f"  if (typeof obj.{prop} !== '{descriptor.kind}') return false;"
    return ""


def _factory_function(name: str, params: str, use_jsdoc: bool) -> str:
    doc = ""
    if use_jsdoc:
        doc = f"/**\n * Create a new {name} instance\n * @returns {{{name}}}\n */\n"
    return f"{doc}function create{name}({params}) {{\n  return new {name}({params});\n}}"


def _validator_function(obj: ObjectOf, use_jsdoc: bool) -> str:
    doc = ""
    if use_jsdoc:
        doc = f"/**\n * Validate a {obj.name} object\n * @param {{Object}} obj\n * @returns {{boolean}}\n */\n"
    lines = [
        f"function is{obj.name}(obj) {{",
        "  if (typeof obj !== 'object' || obj === null) return false;",
    ]
    lines.extend(check for check in (_validator_check(f) for f in obj.fields) if check)
    lines.append("  return true;")
    lines.append("}")
    return doc + "\n".join(lines)


def render_class(obj: ObjectOf, options: JavaScriptOptions) -> List[str]:
    """Generate a class (or ES5 constructor function) plus optional factory and validator."""
    params = ", ".join(to_camel_case(f.name) for f in obj.fields)
    body = [f"    this.{to_camel_case(f.name)} = {to_camel_case(f.name)};" for f in obj.fields]

    if options.use_es6:
        lines = [f"class {obj.name} {{", f"  constructor({params}) {{", *body, "  }", "}"]
    else:
        lines = [f"function {obj.name}({params}) {{", *body, "}"]

    if options.use_jsdoc:
        lines = ["/**", f" * @class {obj.name}", *_property_docs(obj.fields), " */", *lines]

    parts = ["\n".join(lines)]
    if options.generate_factory:
        parts.append(_factory_function(obj.name, params, options.use_jsdoc))
    if options.generate_validator:
        parts.append(_validator_function(obj, options.use_jsdoc))
    return parts


def render_object_template(obj: ObjectOf, options: JavaScriptOptions) -> str:
    """Generate a template object literal with a ``@typedef`` comment."""
    lines: List[str] = []
    if options.use_jsdoc:
        lines += ["/**", f" * @typedef {{Object}} {obj.name}", *_property_docs(obj.fields), " */"]

    keyword = "const" if options.use_es6 else "var"
    lines.append(f"{keyword} {obj.name.lower()}Template = {{")
    lines.extend(f"  {to_camel_case(f.name)}: {_default_value(f.type)}," for f in obj.fields)
    lines.append("};")
    return "\n".join(lines)


def emit(root: TypeDescriptor, options: JavaScriptOptions) -> str:
    """Generate JavaScript for every object type under ``root``."""
    parts: List[str] = []
    for obj in collect_object_types(root):
        if options.use_class:
            parts.extend(render_class(obj, options))
        else:
            parts.append(render_object_template(obj, options))
    return join_declarations(parts)
