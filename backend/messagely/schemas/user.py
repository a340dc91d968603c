"""Pydantic schemas for user profiles."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class UserPublic(BaseModel):
    """Profile fields safe to show to other users."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    first_name: str
    last_name: str
    phone: str


class UserDetail(UserPublic):
    join_at: datetime
    last_login_at: Optional[datetime] = None


class UserListOut(BaseModel):
    users: List[UserPublic]


class UserDetailOut(BaseModel):
    user: UserDetail
