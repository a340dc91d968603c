"""User directory: profiles and per-user message listings."""
from __future__ import annotations

from sqlalchemy.orm import Session

from messagely.core.errors import NotFoundError
from messagely.repositories.user_repository import UserRepository
from messagely.schemas.message import InboundMessage, OutboundMessage
from messagely.schemas.user import UserDetail, UserPublic


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    def all(self, db: Session) -> list[UserPublic]:
        return [UserPublic.model_validate(user) for user in self.user_repository.list_all(db)]

    def get(self, db: Session, username: str) -> UserDetail:
        user = self.user_repository.get_by_username(db, username)
        if user is None:
            raise NotFoundError(f"No such user: {username}")
        return UserDetail.model_validate(user)

    def messages_from(self, db: Session, username: str) -> list[OutboundMessage]:
        return [
            OutboundMessage(
                id=message.id,
                to_user=UserPublic.model_validate(recipient),
                body=message.body,
                sent_at=message.sent_at,
                read_at=message.read_at,
            )
            for message, recipient in self.user_repository.messages_from(db, username)
        ]

    def messages_to(self, db: Session, username: str) -> list[InboundMessage]:
        return [
            InboundMessage(
                id=message.id,
                from_user=UserPublic.model_validate(sender),
                body=message.body,
                sent_at=message.sent_at,
                read_at=message.read_at,
            )
            for message, sender in self.user_repository.messages_to(db, username)
        ]
