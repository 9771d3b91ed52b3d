"""Shared constants used across the transformer service and CLI."""
from __future__ import annotations

# Application version
VERSION: str = "1.0.0"

# Port numbers
INTERNAL_PORT: int = 8000

# Service names
TRANSFORMER_SERVICE_NAME: str = "uml-openapi"

# Output document
OPENAPI_VERSION: str = "3.1.0"
DEFAULT_API_TITLE: str = "PlantUML Generated API"
DEFAULT_API_VERSION: str = "1.0.0"
DEFAULT_API_DESCRIPTION: str = "OpenAPI schema generated from PlantUML diagram."
ERROR_SCHEMA_NAME: str = "ApiError"
COMPONENT_REF_PREFIX: str = "#/components/schemas/"

# Supported rendering formats
SUPPORTED_OUTPUT_FORMATS: list[str] = ["json", "yaml"]

# Sample diagram files
FIXTURE_EXTENSION: str = ".plant"
