"""Pydantic request/response schemas."""

from adonstreet.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
    UserUpdateRequest,
)
from adonstreet.schemas.common import CreatedResponse, MessageResponse
from adonstreet.schemas.dashboard import DashboardCounts
from adonstreet.schemas.health import HealthResponse

__all__ = [
    "CreatedResponse",
    "DashboardCounts",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "TokenClaims",
    "UserPublic",
    "UserUpdateRequest",
]
