"""Application configuration: settings schema and matter.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from matter.core.models import ExtractorConfig


CONFIG_FILE = "matter.yaml"


class Settings(BaseModel):
    toml:                     bool = Field(default=True,  description="Recognize +++ TOML frontmatter")
    yaml_alternate:           bool = Field(default=True,  description="Recognize ... YAML frontmatter")
    require_trailing_newline: bool = Field(default=False, description="Closing delimiter must end with a newline")
    log_level:     str = Field(default="warning", pattern="^(debug|info|warning|error)$")
    output_format: str = Field(default="text", pattern="^(text|json)$", description="text or json")

    def extractor_config(self) -> ExtractorConfig:
        return ExtractorConfig(
            toml=self.toml,
            yaml_alternate=self.yaml_alternate,
            require_trailing_newline=self.require_trailing_newline,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from matter.yaml, then MATTER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MATTER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
