"""Registry of target languages and their emitters."""
from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from typegen.core.errors import UnsupportedLanguageError
from typegen.generators.emitters import (
    csharp,
    go,
    java,
    javascript,
    kotlin,
    php,
    python,
    rust,
    swift,
    typescript,
)
from typegen.generators.inference import TypeDescriptor
from typegen.generators.options import OPTIONS_MODELS, BaseGeneratorOptions, TargetLanguage

Emitter = Callable[[TypeDescriptor, BaseGeneratorOptions], str]


@dataclass(frozen=True)
class LanguageSpec:
    """Metadata and emitter for one target language."""
    language: TargetLanguage
    label: str
    extension: str
    editor_mode: str
    emit: Emitter

    @property
    def options_model(self) -> Type[BaseGeneratorOptions]:
        return OPTIONS_MODELS[self.language]


@dataclass
class GeneratorRegistry:
    mapping: Dict[TargetLanguage, LanguageSpec]

    def get(self, language) -> LanguageSpec:
        try:
            return self.mapping[TargetLanguage(language)]
        except (KeyError, ValueError):
            raise UnsupportedLanguageError(str(getattr(language, "value", language))) from None

    def languages(self) -> List[LanguageSpec]:
        return list(self.mapping.values())

    @staticmethod
    def default() -> "GeneratorRegistry":
        specs = [
            LanguageSpec(TargetLanguage.TYPESCRIPT, "TypeScript", "ts", "typescript", typescript.emit),
            LanguageSpec(TargetLanguage.JAVASCRIPT, "JavaScript", "js", "javascript", javascript.emit),
            LanguageSpec(TargetLanguage.GO, "Go", "go", "plain_text", go.emit),
            LanguageSpec(TargetLanguage.PYTHON, "Python", "py", "python", python.emit),
            LanguageSpec(TargetLanguage.RUST, "Rust", "rs", "rust", rust.emit),
            LanguageSpec(TargetLanguage.JAVA, "Java", "java", "java", java.emit),
            LanguageSpec(TargetLanguage.CSHARP, "C#", "cs", "csharp", csharp.emit),
            LanguageSpec(TargetLanguage.KOTLIN, "Kotlin", "kt", "plain_text", kotlin.emit),
            LanguageSpec(TargetLanguage.SWIFT, "Swift", "swift", "plain_text", swift.emit),
            LanguageSpec(TargetLanguage.PHP, "PHP", "php", "php", php.emit),
        ]
        return GeneratorRegistry(mapping={spec.language: spec for spec in specs})


registry = GeneratorRegistry.default()
