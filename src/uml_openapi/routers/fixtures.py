"""Sample diagram router for the transformer service."""
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Query, Request

from src.shared.models.common import Fixture
from src.shared.models.openapi import TransformResponse
from src.uml_openapi.services.transform_runner import run_transform

router = APIRouter(tags=["fixtures"])


@router.get("/api/fixtures", response_model_by_alias=True)
async def list_fixtures(request: Request) -> list[Fixture]:
    """List the sample PlantUML diagrams sorted by file name."""
    provider = request.app.state.fixtures
    return await asyncio.to_thread(provider.list_fixtures)


@router.get("/api/fixtures/{fixture_id}", response_model_by_alias=True)
async def get_fixture(fixture_id: str, request: Request) -> Fixture:
    """Get a single sample diagram by id."""
    provider = request.app.state.fixtures
    return await asyncio.to_thread(provider.get_fixture, fixture_id)


@router.post("/api/fixtures/{fixture_id}/transform")
async def transform_fixture(
    fixture_id: str,
    request: Request,
    format: str | None = Query(default=None, pattern=r"^(json|yaml)$"),
) -> TransformResponse:
    """Transform a sample diagram into an OpenAPI 3.1 document."""
    provider = request.app.state.fixtures
    fixture = await asyncio.to_thread(provider.get_fixture, fixture_id)
    return await asyncio.to_thread(
        run_transform, fixture.content, request.app.state.config, format
    )
