"""Shared configuration management using pydantic-settings."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from src.shared.constants import (
    DEFAULT_API_DESCRIPTION,
    DEFAULT_API_TITLE,
    DEFAULT_API_VERSION,
)


class SharedConfig(BaseSettings):
    """Base configuration shared across all entry points."""
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class TransformerConfig(SharedConfig):
    """Configuration for the UML to OpenAPI transformer."""
    fixtures_dir: str = Field(default="./fixtures", validation_alias="FIXTURES_DIR")
    api_title: str = Field(default=DEFAULT_API_TITLE, validation_alias="API_TITLE")
    api_version: str = Field(default=DEFAULT_API_VERSION, validation_alias="API_VERSION")
    api_description: str = Field(
        default=DEFAULT_API_DESCRIPTION, validation_alias="API_DESCRIPTION"
    )
    max_diagram_bytes: int = Field(
        default=1_048_576, ge=1, validation_alias="MAX_DIAGRAM_BYTES"
    )
