"""Type inference from JSON samples."""
from typegen.generators.inference.types import (
    BOOLEAN,
    NUMBER,
    STRING,
    UNKNOWN,
    ArrayOf,
    Field,
    Nullable,
    ObjectOf,
    Primitive,
    TypeDescriptor,
    Unknown,
    is_null_literal,
    unwrap,
)
from typegen.generators.inference.infer import infer_type, collect_object_types, nesting_depth
from typegen.generators.inference.utils import (
    to_pascal_case,
    to_camel_case,
    to_snake_case,
)
