"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDBLOCKS_"


class Settings(BaseModel):
    app_name:      str = "mdblocks"
    anchor:        str = Field(default="SBORNICK", description="Path segment preceding the main category")
    untitled:      str = Field(default="Untitled", description="Title used for headings with no text")
    parser_config: str = Field(default="commonmark", description="MarkdownIt parser preset name")
    strip_frontmatter: bool = Field(default=True, description="Strip a leading YAML frontmatter block")
    output_dir:    str = Field(default="dist", description="Directory for exported JSON files")
    output_format: str = Field(default="result", pattern="^(result|records)$", description="result or records")
    workers:       int = Field(default=1, ge=1, description="Parallel parse workers for batch extraction")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOCKS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def default_config_yaml() -> str:
    """Render the default settings as config.yaml text."""
    return yaml.safe_dump(Settings().model_dump(), sort_keys=False)
