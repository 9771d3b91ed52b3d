"""Document assembler: PlantUML diagram -> OpenAPI 3.1 document.

Every function in this module is a pure function with no global state;
each call builds its own schema builder and path map.
"""
from __future__ import annotations

import logging

from src.shared.constants import OPENAPI_VERSION
from src.shared.models.diagram import Diagram
from src.shared.models.openapi import Components, InfoBlock, OpenAPIDocument
from src.uml_openapi.services.path_builder import build_paths
from src.uml_openapi.services.plantuml_parser import parse_plantuml
from src.uml_openapi.services.schema_builder import SchemaBuilder

logger = logging.getLogger(__name__)


def transform_to_openapi(
    diagram: Diagram,
    info: InfoBlock | None = None,
) -> OpenAPIDocument:
    """Project a parsed diagram into an OpenAPI document.

    Args:
        diagram: The intermediate entity graph.
        info: Optional ``info`` block; defaults to the generic title.

    Returns:
        The assembled, frozen document.
    """
    schemas = SchemaBuilder(diagram).build()
    paths = build_paths(diagram.classes, schemas)

    logger.debug("Assembled document: paths=%d schemas=%d", len(paths), len(schemas))
    return OpenAPIDocument(
        openapi=OPENAPI_VERSION,
        info=info or InfoBlock(),
        paths=paths,
        components=Components(schemas=schemas),
    )


def transform_plantuml_to_openapi(
    text: str,
    info: InfoBlock | None = None,
) -> OpenAPIDocument:
    """Parse PlantUML text and project it into an OpenAPI document.

    Never raises for malformed diagram text; unreadable fragments are
    dropped and an empty document is returned when nothing is found.
    """
    return transform_to_openapi(parse_plantuml(text), info)
