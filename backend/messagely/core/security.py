"""Password hashing and signed-token helpers."""
from __future__ import annotations

import jwt
from pwdlib import PasswordHash
from pwdlib.hashers.bcrypt import BcryptHasher

from messagely.core.errors import AuthenticationError

MAX_PASSWORD_LEN = 72  # bcrypt limit


class PasswordHasher:
    """Salted bcrypt hashing with a fixed cost factor."""

    def __init__(self, work_factor: int) -> None:
        self._hasher = PasswordHash((BcryptHasher(rounds=work_factor),))

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison of ``password`` against a stored hash."""
        return self._hasher.verify(password, password_hash)


class TokenIssuer:
    """Signs and verifies ``{"username": ...}`` JWTs.

    Tokens carry no ``exp`` claim, so a token stays valid for as long as the
    signing secret does.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm

    def issue(self, username: str) -> str:
        return jwt.encode({"username": username}, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str | None) -> str:
        if not token:
            raise AuthenticationError("Unauthorized")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Unauthorized") from exc
        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise AuthenticationError("Unauthorized")
        return username
