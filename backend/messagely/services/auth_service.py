"""Authentication service handling registration and login."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from messagely.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from messagely.core.security import MAX_PASSWORD_LEN, PasswordHasher, TokenIssuer
from messagely.repositories.user_repository import UserRepository
from messagely.schemas.user import UserDetail

LOGGER = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        session_factory: sessionmaker,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.session_factory = session_factory

    def register(
        self,
        db: Session,
        *,
        username: str | None,
        password: str | None,
        first_name: str | None,
        last_name: str | None,
        phone: str | None,
    ) -> UserDetail:
        if not all((username, password, first_name, last_name, phone)):
            raise ValidationError("All fields are required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_LEN:
            raise ValidationError(f"password must be <= {MAX_PASSWORD_LEN} bytes")

        password_hash = self.password_hasher.hash(password)
        try:
            user = self.user_repository.create_user(
                db,
                username=username,
                password_hash=password_hash,
                first_name=first_name,
                last_name=last_name,
                phone=phone,
                join_at=datetime.now(timezone.utc),
            )
        except IntegrityError as exc:
            LOGGER.info("Registration rejected, username taken: %s", username)
            raise ConflictError("Username taken. Please pick another!") from exc
        LOGGER.info("Registered user %s", username)
        return UserDetail.model_validate(user)

    def authenticate(self, db: Session, username: str | None, password: str | None) -> bool:
        """Return whether ``password`` matches the stored hash for ``username``.

        Unknown usernames raise the same InvalidCredentialsError a caller
        raises for a failed match, so the two cases look identical.
        """
        if not username or not password:
            raise ValidationError("Username and password required")
        user = self.user_repository.get_by_username(db, username)
        if user is None:
            raise InvalidCredentialsError("Invalid username/password")
        if len(password.encode("utf-8")) > MAX_PASSWORD_LEN:
            return False
        return self.password_hasher.verify(password, user.password)

    def update_login_timestamp(self, db: Session, username: str) -> None:
        updated = self.user_repository.update_last_login(db, username, datetime.now(timezone.utc))
        if not updated:
            raise NotFoundError(f"No such user: {username}")

    def record_login(self, username: str) -> None:
        """Stamp ``last_login_at`` in a session of its own.

        Runs after the response has been sent, so failures cannot reach the
        client and are logged instead.
        """
        db = self.session_factory()
        try:
            self.update_login_timestamp(db, username)
        except Exception:  # noqa: BLE001
            LOGGER.exception("Failed to update last_login_at for %s", username)
        finally:
            db.close()

    def issue_token(self, username: str) -> str:
        return self.token_issuer.issue(username)
