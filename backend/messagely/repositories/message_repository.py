"""Repository for direct message storage."""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session, aliased

from messagely.models.message import Message
from messagely.models.user import User

LOGGER = logging.getLogger(__name__)


class MessageRepository:
    def create_message(
        self,
        db: Session,
        *,
        from_username: str,
        to_username: str,
        body: str,
        sent_at: datetime,
    ) -> Message:
        message = Message(
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=sent_at,
        )
        db.add(message)
        try:
            db.commit()
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB insert failed for message %s -> %s: %s", from_username, to_username, exc)
            raise
        db.refresh(message)
        return message

    def get_with_users(self, db: Session, message_id: int) -> tuple[Message, User, User] | None:
        """Return ``(message, sender, recipient)`` or None."""
        sender = aliased(User)
        recipient = aliased(User)
        row = (
            db.query(Message, sender, recipient)
            .join(sender, Message.from_username == sender.username)
            .join(recipient, Message.to_username == recipient.username)
            .filter(Message.id == message_id)
            .one_or_none()
        )
        if row is None:
            return None
        return row[0], row[1], row[2]

    def mark_read(self, db: Session, message_id: int, read_at: datetime) -> Message | None:
        # Only the first call stamps read_at; later calls leave it untouched.
        (
            db.query(Message)
            .filter(Message.id == message_id, Message.read_at.is_(None))
            .update({Message.read_at: read_at}, synchronize_session=False)
        )
        db.commit()
        return db.get(Message, message_id)
