"""Pydantic schemas for authentication flows."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from messagely.core.security import MAX_PASSWORD_LEN


def _password_length_guard(v: str) -> str:
    if len(v.encode("utf-8")) > MAX_PASSWORD_LEN:
        raise ValueError(f"password must be <= {MAX_PASSWORD_LEN} bytes for bcrypt")
    return v


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_length_guard(cls, v: str) -> str:
        return _password_length_guard(v)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def login_password_length_guard(cls, v: str) -> str:
        return _password_length_guard(v)


class TokenOut(BaseModel):
    token: str
