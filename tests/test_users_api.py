"""用户 CRUD 接口测试"""

from datetime import datetime
from uuid import UUID, uuid4


def create_user(client, **overrides) -> dict:
    payload = {"username": "bob", "email": "b@x.com", "password_hash": "h2"}
    payload.update(overrides)
    response = client.post("/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_root_returns_welcome_message(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the User API"}


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_user_lifecycle(client, alice_payload):
    response = client.post("/users", json=alice_payload)
    assert response.status_code == 201
    created = response.json()
    assert created["username"] == "alice"
    assert created["email"] == "a@x.com"
    assert created["password_hash"] == "h1"
    assert created["is_active"] is False
    assert created["deleted_at"] is None
    assert created["created_at"].endswith("Z")
    user_id = created["id"]
    UUID(user_id)

    response = client.get(f"/users/{user_id}")
    assert response.status_code == 200
    assert response.json() == created

    response = client.put(
        f"/users/{user_id}",
        json={
            "username": "alice2",
            "email": "a@x.com",
            "password_hash": "h1",
            "is_active": True,
        },
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == user_id
    assert updated["username"] == "alice2"
    assert updated["is_active"] is True
    assert updated["created_at"] == created["created_at"]

    response = client.delete(f"/users/{user_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted"}

    response = client.get(f"/users/{user_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_create_assigns_new_ids(client):
    ids = {create_user(client, email=f"user{i}@x.com")["id"] for i in range(5)}

    assert len(ids) == 5


def test_create_honours_is_active(client):
    user = create_user(client, is_active=True)

    assert user["is_active"] is True


def test_create_strips_whitespace(client):
    user = create_user(client, username="  carol  ")

    assert user["username"] == "carol"


def test_create_duplicate_email_fails(client, alice_payload):
    first = client.post("/users", json=alice_payload)
    second = client.post("/users", json={**alice_payload, "username": "other"})

    assert first.status_code == 201
    assert second.status_code == 500
    assert second.json() == {"error": "Failed to create user: email already exists"}
    assert len(client.get("/users").json()) == 1


def test_email_reusable_after_delete(client, alice_payload):
    first = client.post("/users", json=alice_payload).json()
    client.delete(f"/users/{first['id']}")

    response = client.post("/users", json=alice_payload)

    assert response.status_code == 201
    assert response.json()["id"] != first["id"]


def test_create_rejects_empty_required_field(client, alice_payload):
    for field in ("username", "email", "password_hash"):
        response = client.post("/users", json={**alice_payload, field: ""})

        assert response.status_code == 400
        assert response.json() == {
            "error": "username, email, and password_hash are required"
        }

    assert client.get("/users").json() == []


def test_create_rejects_whitespace_only_field(client, alice_payload):
    response = client.post("/users", json={**alice_payload, "email": "   "})

    assert response.status_code == 400


def test_create_rejects_missing_field(client):
    response = client.post("/users", json={"username": "alice", "email": "a@x.com"})

    assert response.status_code == 400
    assert "password_hash" in response.json()["error"]


def test_create_rejects_malformed_json(client):
    response = client.post(
        "/users",
        content=b'{"username": "alice",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert set(response.json()) == {"error"}


def test_create_rejects_wrong_type(client, alice_payload):
    response = client.post("/users", json={**alice_payload, "username": 123})

    assert response.status_code == 400
    assert response.json()["error"].startswith("username:")


def test_list_users_in_creation_order(client):
    names = ["u1", "u2", "u3"]
    for name in names:
        create_user(client, username=name, email=f"{name}@x.com")

    response = client.get("/users")

    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == names


def test_list_excludes_deleted(client):
    keep = create_user(client, email="keep@x.com")
    drop = create_user(client, email="drop@x.com")
    client.delete(f"/users/{drop['id']}")

    response = client.get("/users")

    assert [u["id"] for u in response.json()] == [keep["id"]]


def test_get_unknown_id_returns_404(client):
    response = client.get(f"/users/{uuid4()}")

    assert response.status_code == 404


def test_get_malformed_id_returns_404(client):
    response = client.get("/users/not-a-uuid")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_update_unknown_id_returns_404_and_creates_nothing(client, alice_payload):
    response = client.put(
        f"/users/{uuid4()}",
        json={**alice_payload, "is_active": True},
    )

    assert response.status_code == 404
    assert client.get("/users").json() == []


def test_update_unknown_id_with_bad_body_returns_404(client):
    response = client.put(
        f"/users/{uuid4()}",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 404


def test_update_rejects_malformed_body(client):
    user = create_user(client)

    response = client.put(
        f"/users/{user['id']}",
        content=b"{broken",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert client.get(f"/users/{user['id']}").json() == user


def test_update_requires_all_fields(client):
    user = create_user(client)

    response = client.put(f"/users/{user['id']}", json={"username": "only-name"})

    assert response.status_code == 400
    assert "is_active" in response.json()["error"]


def test_update_accepts_empty_strings(client):
    user = create_user(client)

    response = client.put(
        f"/users/{user['id']}",
        json={"username": "", "email": "b@x.com", "password_hash": "h2", "is_active": False},
    )

    assert response.status_code == 200
    assert response.json()["username"] == ""


def test_update_to_taken_email_fails(client):
    create_user(client, email="taken@x.com")
    user = create_user(client, email="free@x.com")

    response = client.put(
        f"/users/{user['id']}",
        json={"username": "bob", "email": "taken@x.com", "password_hash": "h2", "is_active": False},
    )

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to update user")
    assert client.get(f"/users/{user['id']}").json()["email"] == "free@x.com"


def test_update_refreshes_updated_at(client):
    user = create_user(client)

    response = client.put(
        f"/users/{user['id']}",
        json={"username": "bob", "email": "b@x.com", "password_hash": "h2", "is_active": False},
    )

    before = datetime.fromisoformat(user["updated_at"])
    after = datetime.fromisoformat(response.json()["updated_at"])
    assert after >= before


def test_delete_unknown_id_returns_404(client):
    response = client.delete(f"/users/{uuid4()}")

    assert response.status_code == 404


def test_delete_twice_returns_404(client):
    user = create_user(client)

    assert client.delete(f"/users/{user['id']}").status_code == 200
    assert client.delete(f"/users/{user['id']}").status_code == 404


def test_unknown_route_returns_error_body(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_responses_carry_request_id(client):
    response = client.get("/", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
    assert "X-Process-Time" in response.headers


def test_create_accepts_long_values(client):
    long_name = "a" * 300
    long_hash = "h" * 1024

    user = create_user(client, username=long_name, password_hash=long_hash)

    assert user["username"] == long_name
    assert client.get(f"/users/{user['id']}").json()["password_hash"] == long_hash
