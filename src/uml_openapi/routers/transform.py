"""Parse and transform router for the transformer service."""
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Request

from src.shared.config import TransformerConfig
from src.shared.models.diagram import Diagram
from src.shared.models.openapi import ParseRequest, TransformRequest, TransformResponse
from src.uml_openapi.services.plantuml_parser import parse_plantuml
from src.uml_openapi.services.transform_runner import check_size, run_transform

router = APIRouter(tags=["transform"])


@router.post("/api/parse")
async def parse_diagram(body: ParseRequest, request: Request) -> Diagram:
    """Parse PlantUML text into the intermediate entity graph."""
    check_size(body.diagram, request.app.state.config)
    return await asyncio.to_thread(parse_plantuml, body.diagram)


@router.post("/api/transform")
async def transform_diagram(body: TransformRequest, request: Request) -> TransformResponse:
    """Transform PlantUML text into an OpenAPI 3.1 document."""
    config: TransformerConfig = request.app.state.config
    check_size(body.diagram, config)
    return await asyncio.to_thread(
        run_transform, body.diagram, config, body.format, body.validate_output
    )
