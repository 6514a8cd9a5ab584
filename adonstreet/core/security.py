"""Password hashing and JWT issuance/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from adonstreet.core.config import Settings

# Bcrypt cost (rounds); matches the cost of hashes already stored by the service.
DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. An empty password is hashed like any other."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    Built once per application from explicit configuration; login and the auth
    gate share the same instance so there is a single signing secret.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret:
            raise ValueError("token secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, user_id: int, role: str | None) -> str:
        """Create a JWT with sub/id (user id), role, iat and exp."""
        now = datetime.now(UTC)
        expire = now + timedelta(minutes=self.expire_minutes)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "id": user_id,
            "role": role,
            "exp": expire,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a JWT; return its payload.
        Raises jwt.PyJWTError on bad signature, malformed or expired token.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self.algorithm],
            options={"require": ["exp", "sub"]},
        )
