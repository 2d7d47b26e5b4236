"""Code generation facade: JSON sample -> source text."""
import json
import logging
from typing import Any, Mapping, Optional, Union

from typegen.core.config import settings
from typegen.core.errors import InputTooDeepError
from typegen.generators.inference import infer_type, nesting_depth
from typegen.generators.options import BaseGeneratorOptions, TargetLanguage, options_for
from typegen.generators.registry import registry
from typegen.generators.types import GeneratedFile

log = logging.getLogger(__name__)

OptionsInput = Union[BaseGeneratorOptions, Mapping[str, Any], None]


def resolve_options(language: TargetLanguage, options: OptionsInput) -> BaseGeneratorOptions:
    """Coerce ``options`` into the options model of ``language``."""
    spec = registry.get(language)
    if options is None:
        return spec.options_model()
    if isinstance(options, spec.options_model):
        return options
    if isinstance(options, BaseGeneratorOptions):
        # Options of another language: keep the shared and matching toggles
        return options_for(spec.language, options.model_dump())
    return options_for(spec.language, options)


def generate_code(data: Any, language: TargetLanguage, options: OptionsInput = None) -> str:
    """
    Generate type declarations for a parsed JSON value.

    Args:
        data: Parsed JSON value
        language: Target language
        options: Options model or mapping for that language; None for defaults

    Returns:
        Source text, empty if the sample holds no object type

    Raises:
        InputTooDeepError: If containers nest deeper than
            ``settings.max_nesting_depth``
    """
    spec = registry.get(language)
    opts = resolve_options(spec.language, options)

    if nesting_depth(data) > settings.max_nesting_depth:
        raise InputTooDeepError(settings.max_nesting_depth)

    root = infer_type(data, opts.root_name)
    code = spec.emit(root, opts)

    log.info(
        "Generated %d chars for root %s",
        len(code),
        opts.root_name,
        extra={"language": spec.language.value},
    )
    return code


def generate_from_text(text: str, language: TargetLanguage, options: OptionsInput = None) -> str:
    """
    Parse a JSON sample and generate type declarations for it.

    Blank input yields an empty string. Malformed JSON raises
    ``json.JSONDecodeError`` with the parser's message. Samples nested too
    deeply for the parser or the configured limit raise ``InputTooDeepError``.
    """
    if not text.strip():
        return ""
    try:
        data = json.loads(text)
    except RecursionError:
        raise InputTooDeepError(settings.max_nesting_depth) from None
    return generate_code(data, language, options)


def build_generated_file(code: str, root_name: str, language: TargetLanguage) -> Optional[GeneratedFile]:
    """Wrap generated code as ``<root_name lower-cased>.<extension>``; None for empty code."""
    if not code:
        return None
    spec = registry.get(language)
    return GeneratedFile(path=f"{root_name.lower()}.{spec.extension}", content=code)
