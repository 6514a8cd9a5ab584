"""Body of GET /health/."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV the process was started with")
    auth_enabled: bool = Field(description="Whether CRUD and dashboard routes require a Bearer token")
    database: Literal["connected", "disconnected"]
