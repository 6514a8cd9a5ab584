"""ORM model for application users (registration, login, token claims)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from adonstreet.models.base import Base


class User(Base):
    """
    User account. email_id is the login identifier and is unique.

    password_hash holds a bcrypt hash, never the plain password.
    role is optional; accounts created through registration have none.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_name = Column(String(255), nullable=False)
    email_id = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
