"""Boundary helpers shared by the HTTP routers and the CLI.

Wraps the pure transformation with configuration: the document ``info``
block, the input size limit, optional rendering and validation.
"""
from __future__ import annotations

import logging

from src.shared.config import TransformerConfig
from src.shared.errors import ValidationError
from src.shared.models.openapi import InfoBlock, TransformResponse
from src.uml_openapi.services.document_assembler import transform_plantuml_to_openapi
from src.uml_openapi.services.openapi_validator import validate_document
from src.uml_openapi.services.renderer import render_document

logger = logging.getLogger(__name__)


def info_from_config(config: TransformerConfig) -> InfoBlock:
    """Build the document ``info`` block from configuration."""
    return InfoBlock(
        title=config.api_title,
        version=config.api_version,
        description=config.api_description,
    )


def check_size(text: str, config: TransformerConfig) -> None:
    """Reject diagrams larger than the configured limit."""
    size = len(text.encode("utf-8"))
    if size > config.max_diagram_bytes:
        raise ValidationError(
            f"Diagram is {size} bytes; the limit is {config.max_diagram_bytes} bytes"
        )


def run_transform(
    text: str,
    config: TransformerConfig,
    fmt: str | None = None,
    validate_output: bool = False,
) -> TransformResponse:
    """Transform, then optionally render and validate, synchronously.

    The routers call this via asyncio.to_thread(); the CLI calls it directly.
    """
    document = transform_plantuml_to_openapi(text, info_from_config(config))
    logger.info(
        "Transformed diagram: paths=%d schemas=%d",
        len(document.paths), len(document.schemas),
    )
    return TransformResponse(
        document=document.to_dict(),
        rendered=render_document(document, fmt) if fmt else None,
        validation=validate_document(document) if validate_output else None,
    )
