"""Direct message routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from messagely.api.deps import ensure_logged_in, get_message_service
from messagely.core.db import get_db
from messagely.core.errors import UnauthorizedAccessError
from messagely.schemas.common import ErrorResponse
from messagely.schemas.message import (
    MessageCreate,
    MessageDetailEnvelope,
    MessageOutEnvelope,
    ReadReceiptEnvelope,
)
from messagely.services.message_service import MessageService

router = APIRouter(
    prefix="/messages",
    tags=["messages"],
    responses={
        401: {"model": ErrorResponse, "description": "Not logged in or not a party to the message"},
        404: {"model": ErrorResponse, "description": "Message or recipient not found"},
    },
)


@router.get("/{message_id}", response_model=MessageDetailEnvelope)
def get_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_logged_in),
    message_service: MessageService = Depends(get_message_service),
) -> MessageDetailEnvelope:
    message = message_service.get(db, message_id)
    if current_username not in (message.from_user.username, message.to_user.username):
        raise UnauthorizedAccessError("Access is unauthorized")
    return MessageDetailEnvelope(message=message)


@router.post("", response_model=MessageOutEnvelope)
def send_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_logged_in),
    message_service: MessageService = Depends(get_message_service),
) -> MessageOutEnvelope:
    message = message_service.create(
        db,
        from_username=current_username,
        to_username=payload.to_username,
        body=payload.body,
    )
    return MessageOutEnvelope(message=message)


@router.post("/{message_id}/read", response_model=ReadReceiptEnvelope)
def mark_read(
    message_id: int,
    db: Session = Depends(get_db),
    current_username: str = Depends(ensure_logged_in),
    message_service: MessageService = Depends(get_message_service),
) -> ReadReceiptEnvelope:
    message = message_service.get(db, message_id)
    if message.to_user.username != current_username:
        raise UnauthorizedAccessError("Access is unauthorized")
    return ReadReceiptEnvelope(message=message_service.mark_read(db, message_id))
