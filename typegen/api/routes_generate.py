import json
import logging
import uuid
from typing import List
from fastapi import APIRouter, HTTPException
from typegen.core.config import settings
from typegen.core.errors import InputTooDeepError, UnsupportedLanguageError
from typegen.generators import build_generated_file, generate_from_text, options_for, registry
from typegen.generators.options import options_from_unified
from typegen.generators.registry import LanguageSpec
from typegen.schemas.generate import GenerateRequest, GenerateResponse, LanguageInfo

log = logging.getLogger(__name__)

router = APIRouter()


def _language_info(spec: LanguageSpec) -> LanguageInfo:
    return LanguageInfo(
        value=spec.language,
        label=spec.label,
        extension=spec.extension,
        editor_mode=spec.editor_mode,
        default_options=spec.options_model().model_dump(by_alias=True),
    )


@router.get("/languages", response_model=List[LanguageInfo])
def list_languages():
    return [_language_info(spec) for spec in registry.languages()]


@router.get("/languages/{language}/options")
def get_language_options(language: str):
    try:
        spec = registry.get(language)
    except UnsupportedLanguageError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return spec.options_model().model_dump(by_alias=True)


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest):
    request_id = uuid.uuid4().hex[:12]
    context = {"request_id": request_id, "language": req.language.value}

    if len(req.json_text.encode("utf-8")) > settings.max_input_bytes:
        log.warning("Rejected oversized input", extra=context)
        raise HTTPException(status_code=413, detail=f"Input exceeds {settings.max_input_bytes} bytes")

    spec = registry.get(req.language)
    if req.unified_options:
        options = options_from_unified(spec.language, req.options)
    else:
        options = options_for(spec.language, req.options)

    try:
        code = generate_from_text(req.json_text, spec.language, options)
    except json.JSONDecodeError as exc:
        log.warning("Invalid JSON input: %s", exc, extra=context)
        raise HTTPException(status_code=400, detail=str(exc))
    except InputTooDeepError as exc:
        log.warning("Rejected deeply nested input", extra=context)
        raise HTTPException(status_code=400, detail=str(exc))

    generated = build_generated_file(code, options.root_name, spec.language)
    return GenerateResponse(
        language=spec.language,
        code=code,
        filename=generated.path if generated else None,
        extension=spec.extension,
        editor_mode=spec.editor_mode,
    )
