"""Health check router for the transformer service."""
from __future__ import annotations

import asyncio
import time

from fastapi import APIRouter, Request

from src.shared.constants import TRANSFORMER_SERVICE_NAME, VERSION
from src.shared.models.common import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health(request: Request) -> HealthStatus:
    """Health check endpoint returning service status."""

    def _check() -> HealthStatus:
        provider = request.app.state.fixtures
        start_time = request.app.state.start_time
        fixtures_ok = provider.available()

        return HealthStatus(
            status="healthy" if fixtures_ok else "degraded",
            service_name=TRANSFORMER_SERVICE_NAME,
            version=VERSION,
            fixtures="available" if fixtures_ok else "missing",
            uptime_seconds=time.time() - start_time,
            details={"fixtures_dir": str(provider.directory)},
        )

    return await asyncio.to_thread(_check)
