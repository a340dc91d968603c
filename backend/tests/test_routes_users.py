"""HTTP tests for /users routes and their authorization checks."""

import pytest


def test_list_users_requires_login(client, register):
    register("alice")

    assert client.get("/users").status_code == 401
    bad = client.get("/users", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401
    assert bad.json()["error"]["status"] == 401


def test_list_users(client, register):
    headers = register("alice", first_name="Alice", last_name="Smith")
    register("bob", first_name="Bob", last_name="Adams")

    res = client.get("/users", headers=headers)

    assert res.status_code == 200
    assert res.json()["users"] == [
        {"username": "bob", "first_name": "Bob", "last_name": "Adams", "phone": "+15550000000"},
        {"username": "alice", "first_name": "Alice", "last_name": "Smith", "phone": "+15550000000"},
    ]


def test_get_user_detail(client, register):
    headers = register("alice", first_name="Alice", last_name="Smith")

    res = client.get("/users/alice", headers=headers)

    assert res.status_code == 200
    user = res.json()["user"]
    assert user["username"] == "alice"
    assert user["join_at"] is not None
    assert "password" not in user


@pytest.mark.parametrize("path", ["/users/bob", "/users/bob/to", "/users/bob/from"])
def test_other_users_resources_are_401(client, register, path):
    alice = register("alice")
    register("bob")

    res = client.get(path, headers=alice)

    assert res.status_code == 401
    assert res.json() == {"error": {"message": "Unauthorized", "status": 401}}


@pytest.mark.parametrize("path", ["/users/alice", "/users/alice/to", "/users/alice/from"])
def test_correct_user_routes_require_token(client, register, path):
    register("alice")
    assert client.get(path).status_code == 401


def test_inbox_and_outbox(client, register):
    alice = register("alice", first_name="Alice", last_name="Smith")
    bob = register("bob", first_name="Bob", last_name="Brown")
    sent = client.post("/messages", json={"to_username": "bob", "body": "hi"}, headers=alice).json()["message"]

    outbox = client.get("/users/alice/from", headers=alice).json()["messages"]
    inbox = client.get("/users/bob/to", headers=bob).json()["messages"]

    assert len(outbox) == 1
    assert outbox[0]["id"] == sent["id"]
    assert outbox[0]["to_user"] == {
        "username": "bob",
        "first_name": "Bob",
        "last_name": "Brown",
        "phone": "+15550000000",
    }
    assert outbox[0]["read_at"] is None
    assert len(inbox) == 1
    assert inbox[0]["from_user"]["username"] == "alice"
    assert inbox[0]["body"] == "hi"
    assert client.get("/users/alice/to", headers=alice).json() == {"messages": []}
