"""Message service: send, fetch and mark direct messages as read.

Caller identity is not checked here; the route layer decides who may see or
mark a message.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from messagely.core.errors import NotFoundError, ValidationError
from messagely.repositories.message_repository import MessageRepository
from messagely.repositories.user_repository import UserRepository
from messagely.schemas.message import MessageDetail, MessageOut, ReadReceipt
from messagely.schemas.user import UserPublic

LOGGER = logging.getLogger(__name__)


class MessageService:
    def __init__(self, repo: MessageRepository, user_repository: UserRepository) -> None:
        self.repo = repo
        self.user_repository = user_repository

    def create(self, db: Session, *, from_username: str, to_username: str | None, body: str | None) -> MessageOut:
        if not to_username or not body:
            raise ValidationError("All fields: to_username and body are required")
        if self.user_repository.get_by_username(db, to_username) is None:
            raise NotFoundError(f"No such user: {to_username}")
        message = self.repo.create_message(
            db,
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=datetime.now(timezone.utc),
        )
        LOGGER.info("Message %s sent %s -> %s", message.id, from_username, to_username)
        return MessageOut.model_validate(message)

    def get(self, db: Session, message_id: int) -> MessageDetail:
        row = self.repo.get_with_users(db, message_id)
        if row is None:
            raise NotFoundError(f"No such message: {message_id}")
        message, sender, recipient = row
        return MessageDetail(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=UserPublic.model_validate(sender),
            to_user=UserPublic.model_validate(recipient),
        )

    def mark_read(self, db: Session, message_id: int) -> ReadReceipt:
        message = self.repo.mark_read(db, message_id, datetime.now(timezone.utc))
        if message is None:
            raise NotFoundError(f"No such message: {message_id}")
        LOGGER.info("Message %s read at %s", message.id, message.read_at)
        return ReadReceipt.model_validate(message)
