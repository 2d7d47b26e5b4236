from pathlib import Path
from typing import Any, Dict
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from typegen.core.errors import ConfigError

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "typegen"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    default_language: str = "typescript"
    max_input_bytes: int = 1_000_000
    max_nesting_depth: int = 100

    output_dir: str = "generated"

settings = Settings()


def load_options_file(path: Path) -> Dict[str, Any]:
    """Load generator options from a YAML (or JSON) file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read options file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return data
