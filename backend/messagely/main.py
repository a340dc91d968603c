"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from messagely.api import routes_auth, routes_health, routes_messages, routes_users
from messagely.core.config import Settings, get_settings
from messagely.core.db import create_db_engine, create_session_factory, init_db
from messagely.core.errors import MessagelyError, ValidationError
from messagely.core.security import PasswordHasher, TokenIssuer
from messagely.repositories.message_repository import MessageRepository
from messagely.repositories.user_repository import UserRepository
from messagely.services.auth_service import AuthService
from messagely.services.message_service import MessageService
from messagely.services.user_service import UserService

LOGGER = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query"))
        problems.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(problems) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MessagelyError)
    async def handle_domain_error(request: Request, exc: MessagelyError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError(_describe_validation_error(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.error("❌ Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        error = MessagelyError("Internal Server Error")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    engine = create_db_engine(settings)
    session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(title="Messagely", version="0.1.0", lifespan=lifespan)

    # Initialize persistence and services
    user_repo = UserRepository()
    message_repo = MessageRepository()
    token_issuer = TokenIssuer(settings.JWT_SECRET_KEY, settings.JWT_ALGORITHM)
    password_hasher = PasswordHasher(settings.BCRYPT_WORK_FACTOR)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.token_issuer = token_issuer
    app.state.auth_service = AuthService(user_repo, password_hasher, token_issuer, session_factory)
    app.state.user_service = UserService(user_repo)
    app.state.message_service = MessageService(message_repo, user_repo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(routes_auth.router)
    app.include_router(routes_users.router)
    app.include_router(routes_messages.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app


app = create_app()
