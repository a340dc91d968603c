"""HTTP tests for /auth routes and the error envelope."""

from datetime import datetime

import pytest

ALICE = {
    "username": "alice",
    "password": "secret1",
    "first_name": "Alice",
    "last_name": "Smith",
    "phone": "+15551234567",
}


def test_register_returns_token_and_stamps_login(client):
    res = client.post("/auth/register", json=ALICE)

    assert res.status_code == 200
    token = res.json()["token"]

    profile = client.get("/users/alice", headers={"Authorization": f"Bearer {token}"})
    assert profile.status_code == 200
    assert profile.json()["user"]["last_login_at"] is not None


def test_register_duplicate_username(client):
    client.post("/auth/register", json=ALICE)

    res = client.post("/auth/register", json={**ALICE, "first_name": "Mallory"})

    assert res.status_code == 400
    assert res.json() == {"error": {"message": "Username taken. Please pick another!", "status": 400}}


@pytest.mark.parametrize("missing", ["username", "password", "first_name", "last_name", "phone"])
def test_register_missing_field(client, missing):
    body = {k: v for k, v in ALICE.items() if k != missing}

    res = client.post("/auth/register", json=body)

    assert res.status_code == 400
    assert res.json()["error"]["status"] == 400
    assert missing in res.json()["error"]["message"]


def test_register_rejects_password_longer_than_bcrypt_limit(client):
    res = client.post("/auth/register", json={**ALICE, "password": "x" * 73})
    assert res.status_code == 400


def test_login_returns_token_and_advances_last_login(client, register):
    headers = register("alice")
    before = client.get("/users/alice", headers=headers).json()["user"]["last_login_at"]

    res = client.post("/auth/login", json={"username": "alice", "password": "secret1"})

    assert res.status_code == 200
    token = res.json()["token"]
    after = client.get("/users/alice", headers={"Authorization": f"Bearer {token}"}).json()["user"]["last_login_at"]
    assert datetime.fromisoformat(after) > datetime.fromisoformat(before)


def test_login_failures_look_the_same(client, register):
    register("alice")

    wrong_password = client.post("/auth/login", json={"username": "alice", "password": "nope"})
    unknown_user = client.post("/auth/login", json={"username": "nobody", "password": "secret1"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["error"]["message"] == "Invalid username/password"


def test_login_requires_both_fields(client):
    res = client.post("/auth/login", json={"username": "alice"})
    assert res.status_code == 400


def test_unexpected_errors_become_500_envelope(settings):
    from fastapi.testclient import TestClient

    from messagely.main import create_app

    app = create_app(settings)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        res = test_client.get("/boom")

    assert res.status_code == 500
    assert res.json() == {"error": {"message": "Internal Server Error", "status": 500}}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
