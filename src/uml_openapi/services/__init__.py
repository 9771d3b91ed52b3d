"""PlantUML parsing and OpenAPI projection services."""

from src.uml_openapi.services.cardinality import interpret_cardinality, parse_cardinality
from src.uml_openapi.services.document_assembler import (
    transform_plantuml_to_openapi,
    transform_to_openapi,
)
from src.uml_openapi.services.fixture_provider import FixtureProvider
from src.uml_openapi.services.openapi_validator import validate_document
from src.uml_openapi.services.plantuml_parser import parse_plantuml
from src.uml_openapi.services.renderer import render_document
from src.uml_openapi.services.schema_builder import SchemaBuilder, build_component_schemas

__all__ = [
    "FixtureProvider",
    "SchemaBuilder",
    "build_component_schemas",
    "interpret_cardinality",
    "parse_cardinality",
    "parse_plantuml",
    "render_document",
    "transform_plantuml_to_openapi",
    "transform_to_openapi",
    "validate_document",
]
