from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict
from typegen.generators.options import TargetLanguage

class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    json_text: str = Field(..., alias="json", examples=['{"id": 1, "name": "x", "tags": []}'])
    language: TargetLanguage = TargetLanguage.TYPESCRIPT
    options: Dict[str, Any] = {}
    # options holds one flat record with every language's toggles
    unified_options: bool = False

class GenerateResponse(BaseModel):
    language: TargetLanguage
    code: str
    filename: str | None = None
    extension: str
    editor_mode: str


class LanguageInfo(BaseModel):
    value: TargetLanguage
    label: str
    extension: str
    editor_mode: str
    default_options: Dict[str, Any]
