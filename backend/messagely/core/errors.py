"""Domain errors carrying the HTTP status they map to at the API boundary."""
from __future__ import annotations

from fastapi import status


class MessagelyError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status_code}}


class ValidationError(MessagelyError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(MessagelyError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentialsError(MessagelyError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(MessagelyError):
    status_code = status.HTTP_401_UNAUTHORIZED


class UnauthorizedAccessError(MessagelyError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(MessagelyError):
    status_code = status.HTTP_404_NOT_FOUND
