"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import insert
from sqlalchemy.orm import Session

from messagely.models.message import Message
from messagely.models.user import User

LOGGER = logging.getLogger(__name__)


class UserRepository:
    def create_user(
        self,
        db: Session,
        *,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        phone: str,
        join_at: datetime,
    ) -> User:
        # Plain INSERT so a taken username fails on the primary key, even when
        # the existing row is already loaded in this session.
        try:
            db.execute(
                insert(User).values(
                    username=username,
                    password=password_hash,
                    first_name=first_name,
                    last_name=last_name,
                    phone=phone,
                    join_at=join_at,
                )
            )
            db.commit()
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.warning("DB insert failed for user=%s: %s", username, exc)
            raise
        return db.get(User, username)

    def get_by_username(self, db: Session, username: str) -> User | None:
        return db.get(User, username)

    def update_last_login(self, db: Session, username: str, logged_in_at: datetime) -> bool:
        updated = (
            db.query(User)
            .filter(User.username == username)
            .update({User.last_login_at: logged_in_at}, synchronize_session=False)
        )
        db.commit()
        return updated > 0

    def list_all(self, db: Session) -> list[User]:
        return db.query(User).order_by(User.last_name, User.first_name, User.username).all()

    def messages_from(self, db: Session, username: str) -> list[tuple[Message, User]]:
        """Messages sent by ``username`` paired with their recipient."""
        return (
            db.query(Message, User)
            .join(User, Message.to_username == User.username)
            .filter(Message.from_username == username)
            .order_by(Message.sent_at, Message.id)
            .all()
        )

    def messages_to(self, db: Session, username: str) -> list[tuple[Message, User]]:
        """Messages received by ``username`` paired with their sender."""
        return (
            db.query(Message, User)
            .join(User, Message.from_username == User.username)
            .filter(Message.to_username == username)
            .order_by(Message.sent_at, Message.id)
            .all()
        )
