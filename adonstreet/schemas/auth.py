"""Request/response schemas for registration, login and user endpoints."""

from pydantic import BaseModel, Field

from adonstreet.models.user import User


class RegisterRequest(BaseModel):
    """New account. No password policy is enforced; an empty password is hashed as-is."""

    userName: str = Field(..., description="Display name")
    emailId: str = Field(..., description="Login identifier; unique across users")
    password: str = Field(default="", description="Plain password, hashed before storage")


class UserUpdateRequest(RegisterRequest):
    """Full replacement of a user; the password is always re-hashed."""


class LoginRequest(BaseModel):
    """Credentials for login."""

    emailId: str = Field(..., description="Email used at registration")
    password: str = Field(..., description="Password")


class UserPublic(BaseModel):
    """User fields safe to return to clients (no password hash)."""

    id: int
    userName: str
    emailId: str
    role: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(
            id=user.id,
            userName=user.user_name,
            emailId=user.email_id,
            role=user.role,
        )


class LoginResponse(BaseModel):
    """Successful login: the matched user rows (redacted) and a Bearer token."""

    message: str = "Login successful"
    data: list[UserPublic]
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")


class TokenClaims(BaseModel):
    """Identity claims decoded from a valid access token."""

    id: int
    role: str | None = None
