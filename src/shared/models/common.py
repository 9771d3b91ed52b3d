"""Common Pydantic v2 data models shared across entry points."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Health status of the service."""
    status: str = Field(
        default="healthy",
        pattern=r"^(healthy|degraded|unhealthy)$"
    )
    service_name: str
    version: str
    fixtures: str = Field(
        default="available",
        pattern=r"^(available|missing)$"
    )
    uptime_seconds: float
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = {"from_attributes": True}


class Fixture(BaseModel):
    """A sample PlantUML diagram shipped with the service."""
    id: str
    file_name: str = Field(..., alias="fileName")
    label: str
    content: str

    model_config = {"from_attributes": True, "populate_by_name": True}
