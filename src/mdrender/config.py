"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "mdrender"
    curly_quotes:  bool = Field(default=False, description="Convert straight quotes to curly quotes in prose")
    footnotes:     bool = Field(default=True,  description="Enable footnote syntax")
    parser_config: str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    source_ext:    str  = Field(default="md",   pattern="^[A-Za-z0-9]+$", description="Extension of source documents")
    output_ext:    str  = Field(default="html", pattern="^[A-Za-z0-9]+$", description="Extension of rendered documents")
    output_dir:    str  = Field(default="book", description="Directory for rendered HTML files")
    log_level:     str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDRENDER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDRENDER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
