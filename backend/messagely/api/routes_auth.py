"""Authentication API routes."""
from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from messagely.api.deps import get_auth_service
from messagely.core.db import get_db
from messagely.core.errors import InvalidCredentialsError
from messagely.schemas.auth import LoginRequest, RegisterRequest, TokenOut
from messagely.schemas.common import ErrorResponse
from messagely.services.auth_service import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={400: {"model": ErrorResponse, "description": "Invalid input or credentials"}},
)


@router.post("/register", response_model=TokenOut)
def register(
    payload: RegisterRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenOut:
    user = auth_service.register(
        db,
        username=payload.username,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
    )
    token = auth_service.issue_token(user.username)
    background_tasks.add_task(auth_service.record_login, user.username)
    return TokenOut(token=token)


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenOut:
    if not auth_service.authenticate(db, payload.username, payload.password):
        raise InvalidCredentialsError("Invalid username/password")
    token = auth_service.issue_token(payload.username)
    background_tasks.add_task(auth_service.record_login, payload.username)
    return TokenOut(token=token)
