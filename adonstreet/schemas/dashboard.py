"""Pydantic schema for the dashboard counts endpoint."""

from pydantic import BaseModel, Field


class DashboardCounts(BaseModel):
    """Row count of each resource table."""

    vehicles: int = Field(ge=0)
    societies: int = Field(ge=0)
    balloons: int = Field(ge=0)
    screens: int = Field(ge=0)
    hoardings: int = Field(ge=0)
