"""Pydantic v2 models for the generated OpenAPI document."""
from __future__ import annotations

import copy
from typing import Any, Literal

from pydantic import BaseModel, Field

from src.shared.constants import (
    DEFAULT_API_DESCRIPTION,
    DEFAULT_API_TITLE,
    DEFAULT_API_VERSION,
    OPENAPI_VERSION,
)


class InfoBlock(BaseModel):
    """The ``info`` object of the generated document."""
    title: str = DEFAULT_API_TITLE
    version: str = DEFAULT_API_VERSION
    description: str = DEFAULT_API_DESCRIPTION

    model_config = {"frozen": True}


class Components(BaseModel):
    """The ``components`` object; only schemas are generated."""
    schemas: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class OpenAPIDocument(BaseModel):
    """Assembled OpenAPI 3.1 document."""
    openapi: str = OPENAPI_VERSION
    info: InfoBlock = Field(default_factory=InfoBlock)
    paths: dict[str, Any] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    model_config = {"frozen": True}

    @property
    def schemas(self) -> dict[str, Any]:
        return self.components.schemas

    def to_dict(self) -> dict[str, Any]:
        """Return a detached plain-dict copy in wire form."""
        return copy.deepcopy(self.model_dump(mode="json"))


class ValidationResult(BaseModel):
    """Result of validating a generated document."""
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ParseRequest(BaseModel):
    """Request carrying raw PlantUML text."""
    diagram: str

    model_config = {"from_attributes": True}


class TransformRequest(BaseModel):
    """Request to transform PlantUML text into an OpenAPI document."""
    diagram: str
    format: Literal["json", "yaml"] | None = None
    validate_output: bool = False

    model_config = {"from_attributes": True}


class TransformResponse(BaseModel):
    """Generated document plus optional rendering and validation."""
    document: dict[str, Any]
    rendered: str | None = None
    validation: ValidationResult | None = None

    model_config = {"from_attributes": True}
