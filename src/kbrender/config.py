"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    excerpt_length:  int  = Field(default=120, ge=1, description="Max excerpt characters before the ellipsis")
    slug_max_length: int  = Field(default=50,  ge=1, description="Max heading anchor length")
    toc_skip_fences: bool = Field(default=False, description="Ignore heading-like lines inside code fences in the TOC")
    output_dir:      str  = Field(default="dist", description="Directory for rendered JSON + HTML files")
    log_level:       str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then KBRENDER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"KBRENDER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
