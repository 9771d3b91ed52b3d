"""UML to OpenAPI transformer FastAPI application."""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.shared.config import TransformerConfig
from src.shared.constants import INTERNAL_PORT, TRANSFORMER_SERVICE_NAME, VERSION
from src.shared.errors import register_exception_handlers
from src.shared.logging import TraceIDMiddleware, setup_logging
from src.uml_openapi.services.fixture_provider import FixtureProvider

config = TransformerConfig()
logger = setup_logging(TRANSFORMER_SERVICE_NAME, config.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - initialize and cleanup resources."""
    app.state.start_time = time.time()
    app.state.config = config
    app.state.fixtures = FixtureProvider(config.fixtures_dir)

    logger.info(
        "Service started: name=%s version=%s port=%d fixtures=%s",
        TRANSFORMER_SERVICE_NAME, VERSION, INTERNAL_PORT, config.fixtures_dir,
    )
    yield

    logger.info("Service stopped: name=%s", TRANSFORMER_SERVICE_NAME)


app = FastAPI(
    title="UML to OpenAPI Transformer",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(TraceIDMiddleware)
register_exception_handlers(app)

# Register all routers
from src.uml_openapi.routers.health import router as health_router
from src.uml_openapi.routers.transform import router as transform_router
from src.uml_openapi.routers.fixtures import router as fixtures_router

app.include_router(health_router)
app.include_router(transform_router)
app.include_router(fixtures_router)
