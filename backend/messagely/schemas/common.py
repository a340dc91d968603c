"""Common/shared schemas."""
from __future__ import annotations

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "ok"


class ErrorBody(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    error: ErrorBody
