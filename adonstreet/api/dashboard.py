"""Dashboard endpoint: row counts for every resource table."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from adonstreet.api.resources import RESOURCES
from adonstreet.core.database import get_db
from adonstreet.schemas.dashboard import DashboardCounts

router = APIRouter()


@router.get("/counts", response_model=DashboardCounts)
def get_counts(
    db: Annotated[Session, Depends(get_db)],
) -> DashboardCounts:
    """
    Return the number of rows in each resource table.

    One COUNT per table; if any of them fails the whole request fails.
    """
    counts = {
        resource.name: db.scalar(select(func.count()).select_from(resource.model))
        for resource in RESOURCES
    }
    return DashboardCounts(**counts)
