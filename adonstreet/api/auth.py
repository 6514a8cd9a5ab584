"""Registration, login and the Bearer token auth gate (AuthGate, require_claims)."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from adonstreet.core.config import Settings
from adonstreet.core.database import get_db
from adonstreet.core.security import TokenService, hash_password, verify_password
from adonstreet.models.user import User
from adonstreet.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
)
from adonstreet.schemas.common import CreatedResponse

logger = logging.getLogger(__name__)

router = APIRouter()

security = HTTPBearer(auto_error=False)


def _invalid_token() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthGate:
    """
    Validates the Bearer credentials extracted by `security` on protected requests.

    No Authorization header -> 403 before any decoding is attempted. A header
    HTTPBearer could not turn into credentials (wrong scheme, no token), bad
    signature, malformed or expired token -> 401. On success the claims are
    stored on request.state.claims for the rest of that request only. No role
    check is made here; handlers decide what a role may do.
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def __call__(
        self,
        request: Request,
        credentials: HTTPAuthorizationCredentials | None,
    ) -> TokenClaims:
        if credentials is None:
            if not request.headers.get("Authorization"):
                logger.info("Rejected %s %s: no token", request.method, request.url.path)
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="No token provided",
                )
            logger.info("Rejected %s %s: malformed Authorization header", request.method, request.url.path)
            raise _invalid_token()
        token = credentials.credentials.strip()
        if not token:
            raise _invalid_token()
        try:
            payload = self.token_service.decode(token)
        except jwt.PyJWTError as e:
            logger.info("Rejected %s %s: %s", request.method, request.url.path, e)
            raise _invalid_token() from e
        try:
            claims = TokenClaims(id=int(payload["sub"]), role=payload.get("role"))
        except (KeyError, TypeError, ValueError) as e:
            raise _invalid_token() from e
        request.state.claims = claims
        return claims


def get_token_service(request: Request) -> TokenService:
    """Dependency: the application's token service (built once in create_app)."""
    return request.app.state.token_service


def get_app_settings(request: Request) -> Settings:
    """Dependency: the Settings the running application was built with."""
    return request.app.state.settings


def require_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Dependency: run the application's auth gate and return the token claims."""
    gate: AuthGate = request.app.state.auth_gate
    return gate(request, credentials)


def email_taken(db: Session, email_id: str, exclude_id: int | None = None) -> bool:
    """True if another user already registered email_id."""
    query = db.query(User.id).filter(User.email_id == email_id)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def _email_exists() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email already exists",
    )


@router.post("/register", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CreatedResponse:
    """
    Create an account. The password is bcrypt-hashed before it reaches the store.
    A duplicate emailId is rejected with 400 and nothing is written.
    """
    if email_taken(db, body.emailId):
        raise _email_exists()

    user = User(
        user_name=body.userName,
        email_id=body.emailId,
        password_hash=hash_password(body.password, rounds=settings.BCRYPT_ROUNDS),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same email.
        db.rollback()
        raise _email_exists() from e
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return CreatedResponse(message="User created", id=user.id)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """
    Authenticate with emailId and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    users = db.query(User).filter(User.email_id == body.emailId).all()
    if not users:
        logger.info("Login failed: unknown email")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User not found",
        )
    user = users[0]
    if not verify_password(body.password, user.password_hash):
        logger.info("Login failed: bad password for user id=%s", user.id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )
    token = token_service.issue(user.id, user.role)
    return LoginResponse(
        data=[UserPublic.from_user(u) for u in users],
        token=token,
    )


@router.get("/me", response_model=UserPublic)
def read_current_user(
    claims: Annotated[TokenClaims, Depends(require_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    """Return the account the presented token was issued for."""
    user = db.get(User, claims.id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserPublic.from_user(user)
