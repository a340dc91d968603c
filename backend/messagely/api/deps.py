"""Request dependencies: service lookup and authorization checks.

Every authorization failure answers 401, including a valid token used against
another user's resources.
"""
from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from messagely.core.errors import UnauthorizedAccessError
from messagely.core.security import TokenIssuer
from messagely.services.auth_service import AuthService
from messagely.services.message_service import MessageService
from messagely.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_message_service(request: Request) -> MessageService:
    return request.app.state.message_service


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def ensure_logged_in(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """Return the username carried by a valid bearer token."""
    token = credentials.credentials if credentials else None
    return token_issuer.verify(token)


def ensure_correct_user(username: str, current_username: str = Depends(ensure_logged_in)) -> str:
    """Require the token's username to match the ``{username}`` path parameter."""
    if current_username != username:
        raise UnauthorizedAccessError("Unauthorized")
    return current_username
