"""Users CRUD. Responses never include the password hash."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from adonstreet.api.auth import email_taken, get_app_settings
from adonstreet.core.config import Settings
from adonstreet.core.database import get_db
from adonstreet.core.security import hash_password
from adonstreet.models.user import User
from adonstreet.schemas.auth import UserPublic, UserUpdateRequest
from adonstreet.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get("", response_model=list[UserPublic])
def list_users(
    db: Annotated[Session, Depends(get_db)],
) -> list[UserPublic]:
    users = db.query(User).order_by(User.id).all()
    return [UserPublic.from_user(u) for u in users]


@router.get("/{user_id}", response_model=UserPublic)
def get_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    return UserPublic.from_user(_get_user_or_404(db, user_id))


@router.put("/{user_id}", response_model=MessageResponse)
def replace_user(
    user_id: int,
    body: UserUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    """
    Replace name, email and password of a user. The password is always re-hashed.
    Tokens issued before the change stay valid until they expire.
    """
    user = _get_user_or_404(db, user_id)
    if email_taken(db, body.emailId, exclude_id=user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        )
    user.user_name = body.userName
    user.email_id = body.emailId
    user.password_hash = hash_password(body.password, rounds=settings.BCRYPT_ROUNDS)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        ) from e
    logger.info("Updated user id=%s", user_id)
    return MessageResponse(message="User updated")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    user = _get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s", user_id)
    return MessageResponse(message="User deleted")
