"""User directory routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from messagely.api.deps import ensure_correct_user, ensure_logged_in, get_user_service
from messagely.core.db import get_db
from messagely.schemas.common import ErrorResponse
from messagely.schemas.message import InboundMessagesOut, OutboundMessagesOut
from messagely.schemas.user import UserDetailOut, UserListOut
from messagely.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or foreign token"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)


@router.get("", response_model=UserListOut)
def list_users(
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_logged_in),  # noqa: ARG001 - ensures auth
    user_service: UserService = Depends(get_user_service),
) -> UserListOut:
    return UserListOut(users=user_service.all(db))


@router.get("/{username}", response_model=UserDetailOut)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_correct_user),  # noqa: ARG001 - ensures auth
    user_service: UserService = Depends(get_user_service),
) -> UserDetailOut:
    return UserDetailOut(user=user_service.get(db, username))


@router.get("/{username}/to", response_model=InboundMessagesOut)
def messages_to_user(
    username: str,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_correct_user),  # noqa: ARG001 - ensures auth
    user_service: UserService = Depends(get_user_service),
) -> InboundMessagesOut:
    return InboundMessagesOut(messages=user_service.messages_to(db, username))


@router.get("/{username}/from", response_model=OutboundMessagesOut)
def messages_from_user(
    username: str,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_correct_user),  # noqa: ARG001 - ensures auth
    user_service: UserService = Depends(get_user_service),
) -> OutboundMessagesOut:
    return OutboundMessagesOut(messages=user_service.messages_from(db, username))
