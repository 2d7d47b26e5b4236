"""Per-language generation options."""
import logging
from enum import Enum
from typing import Any, Dict, Literal, Mapping, Set, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)


class TargetLanguage(str, Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    GO = "go"
    PYTHON = "python"
    RUST = "rust"
    JAVA = "java"
    CSHARP = "csharp"
    KOTLIN = "kotlin"
    SWIFT = "swift"
    PHP = "php"


class BaseGeneratorOptions(BaseModel):
    """Options shared by all generators."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    root_name: str = "Root"
    optional_properties: bool = False

    @field_validator("root_name", mode="before")
    @classmethod
    def _default_blank_root_name(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return "Root"
        return value.strip() if isinstance(value, str) else value


class TypeScriptOptions(BaseGeneratorOptions):
    use_interface: bool = True
    use_export: bool = True
    use_readonly: bool = False
    strict_null_checks: bool = True


class JavaScriptOptions(BaseGeneratorOptions):
    use_class: bool = True
    use_jsdoc: bool = Field(True, alias="useJSDoc")
    use_es6: bool = Field(True, alias="useES6")
    generate_factory: bool = False
    generate_validator: bool = False


class GoOptions(BaseGeneratorOptions):
    use_pointers: bool = False
    omit_empty: bool = True
    use_json_tag: bool = True


class PythonOptions(BaseGeneratorOptions):
    style: Literal["dataclass", "typeddict"] = "dataclass"
    # dataclass options
    use_frozen: bool = False
    use_slots: bool = False
    use_kw_only: bool = False
    # typeddict options
    use_total: bool = True


class RustOptions(BaseGeneratorOptions):
    derive_serde: bool = True
    derive_debug: bool = True
    derive_clone: bool = True
    derive_default: bool = False
    use_box: bool = False


class JavaOptions(BaseGeneratorOptions):
    package_name: str = "com.example"
    class_style: Literal["record", "pojo", "lombok", "immutables"] = "record"
    serialization_library: Literal["none", "jackson", "gson", "moshi"] = "none"
    use_validation: bool = False
    generate_builder: bool = False
    generate_equals: bool = True
    use_optional: bool = False


class CSharpOptions(BaseGeneratorOptions):
    use_records: bool = True
    use_nullable_reference_types: bool = True
    use_system_text_json: bool = True
    use_newtonsoft: bool = False
    generate_data_contract: bool = False


class KotlinOptions(BaseGeneratorOptions):
    use_data_class: bool = True
    serialization_library: Literal["none", "kotlinx", "gson", "moshi", "jackson"] = "none"
    use_default_values: bool = False


class SwiftOptions(BaseGeneratorOptions):
    use_struct: bool = True
    use_coding_keys: bool = True
    use_optional_properties: bool = False


class PhpOptions(BaseGeneratorOptions):
    use_strict_types: bool = True
    use_readonly_properties: bool = False
    use_constructor_promotion: bool = True
    namespace: str = ""


OPTIONS_MODELS: Dict[TargetLanguage, Type[BaseGeneratorOptions]] = {
    TargetLanguage.TYPESCRIPT: TypeScriptOptions,
    TargetLanguage.JAVASCRIPT: JavaScriptOptions,
    TargetLanguage.GO: GoOptions,
    TargetLanguage.PYTHON: PythonOptions,
    TargetLanguage.RUST: RustOptions,
    TargetLanguage.JAVA: JavaOptions,
    TargetLanguage.CSHARP: CSharpOptions,
    TargetLanguage.KOTLIN: KotlinOptions,
    TargetLanguage.SWIFT: SwiftOptions,
    TargetLanguage.PHP: PhpOptions,
}

# Keys of the flat, all-languages record that differ from the per-language name
UNIFIED_KEY_RENAMES: Dict[TargetLanguage, Dict[str, str]] = {
    TargetLanguage.PYTHON: {"python_style": "style", "pythonStyle": "style"},
    TargetLanguage.KOTLIN: {
        "kotlin_serialization_library": "serialization_library",
        "kotlinSerializationLibrary": "serialization_library",
    },
}


def get_default_options(language: TargetLanguage) -> BaseGeneratorOptions:
    """Return default options for a language."""
    return OPTIONS_MODELS[TargetLanguage(language)]()


def options_for(language: TargetLanguage, raw: Mapping[str, Any] | None = None) -> BaseGeneratorOptions:
    """
    Build options for a language from a plain mapping.

    Unknown keys are ignored. Keys whose values do not validate are dropped
    and fall back to their defaults.
    """
    model = OPTIONS_MODELS[TargetLanguage(language)]
    data = dict(raw or {})
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        rejected = _rejected_keys(model, exc)
        log.warning(
            "Ignoring invalid options, using defaults: %s",
            ", ".join(sorted(rejected)),
            extra={"language": TargetLanguage(language).value},
        )
        cleaned = {key: value for key, value in data.items() if key not in rejected}
        return model.model_validate(cleaned)


def _rejected_keys(model: Type[BaseGeneratorOptions], exc: ValidationError) -> Set[str]:
    """Both spellings (field name and camelCase alias) of every field that failed validation."""
    locs = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
    rejected: Set[str] = set()
    for name, info in model.model_fields.items():
        spellings = {name, info.alias or name}
        if spellings & locs:
            rejected |= spellings
    return rejected


def options_from_unified(language: TargetLanguage, unified: Mapping[str, Any]) -> BaseGeneratorOptions:
    """Pick one language's options out of a flat record holding every language's toggles."""
    language = TargetLanguage(language)
    renames = UNIFIED_KEY_RENAMES.get(language, {})
    fields = OPTIONS_MODELS[language].model_fields
    own_keys = {spelling for name in renames.values() for spelling in (name, fields[name].alias)}
    data: Dict[str, Any] = {}
    for key, value in unified.items():
        if key in renames:
            data[renames[key]] = value
        elif key in own_keys:
            # Shared name such as serialization_library belongs to another language here
            continue
        else:
            data[key] = value
    return options_for(language, data)
