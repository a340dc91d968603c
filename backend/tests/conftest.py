import pytest
from fastapi.testclient import TestClient

from messagely.core.config import Settings
from messagely.core.db import create_db_engine, create_session_factory, init_db
from messagely.core.security import PasswordHasher, TokenIssuer
from messagely.main import create_app
from messagely.repositories.message_repository import MessageRepository
from messagely.repositories.user_repository import UserRepository
from messagely.services.auth_service import AuthService
from messagely.services.message_service import MessageService
from messagely.services.user_service import UserService

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings():
    """In-memory SQLite and the cheapest bcrypt cost."""
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET_KEY=TEST_SECRET,
        BCRYPT_WORK_FACTOR=4,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory(settings):
    engine = create_db_engine(settings)
    init_db(engine)
    try:
        yield create_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def user_repo():
    return UserRepository()


@pytest.fixture
def auth_service(user_repo, token_issuer, session_factory):
    return AuthService(user_repo, PasswordHasher(4), token_issuer, session_factory)


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def message_service(user_repo):
    return MessageService(MessageRepository(), user_repo)


@pytest.fixture
def make_user(db, auth_service):
    """Register a user straight through the service layer."""

    def _make_user(username, first_name="Test", last_name="User", password="secret1", phone="+15550000000"):
        return auth_service.register(
            db,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        )

    return _make_user


@pytest.fixture
def register(client):
    """Register a user over HTTP and return its bearer headers."""

    def _register(username, first_name="Test", last_name="User", password="secret1", phone="+15550000000"):
        res = client.post(
            "/auth/register",
            json={
                "username": username,
                "password": password,
                "first_name": first_name,
                "last_name": last_name,
                "phone": phone,
            },
        )
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['token']}"}

    return _register
