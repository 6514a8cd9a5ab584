"""GET /health/: liveness plus the settings a deployment most often gets wrong."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from adonstreet.api.auth import get_app_settings
from adonstreet.core.config import Settings
from adonstreet.core.database import check_db_connected, get_db
from adonstreet.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Always 200 while the process serves requests; `database` tells whether the store answers."""
    return HealthResponse(
        environment=settings.APP_ENV,
        auth_enabled=settings.AUTH_ENABLED,
        database="connected" if check_db_connected(db) else "disconnected",
    )
