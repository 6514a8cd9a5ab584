"""Response bodies shared by every CRUD endpoint."""

from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    """Body of a 201: confirmation message and the generated identifier."""

    message: str
    id: int


class ValidationErrorResponse(BaseModel):
    """Body of a 422: the request body, path or query did not validate."""

    message: str
    errors: list[dict[str, Any]]
