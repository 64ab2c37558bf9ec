"""HTTP tests for the users resource, run against both store variants."""

import asyncio
import uuid

from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_store import InMemoryUserStore


def test_create_user(client):
    response = client.post("/users", json={"name": "Ann", "email": "a@x.com"})

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Ann"
    assert data["email"] == "a@x.com"
    assert "id" in data


def test_create_user_requires_name_and_email(client):
    response = client.post("/users", json={"name": "Ann"})

    assert response.status_code == 422


def test_list_users(client):
    client.post("/users", json={"name": "Ann", "email": "a@x.com"})
    client.post("/users", json={"name": "Bo", "email": "b@x.com"})

    response = client.get("/users")

    assert response.status_code == 200
    assert [user["name"] for user in response.json()] == ["Ann", "Bo"]


def test_get_user(client):
    user_id = client.post("/users", json={"name": "Ann", "email": "a@x.com"}).json()["id"]

    response = client.get(f"/users/{user_id}")

    assert response.status_code == 200
    assert response.json()["id"] == user_id


def test_update_user(client):
    user_id = client.post("/users", json={"name": "Bo", "email": "b@x.com"}).json()["id"]

    response = client.put(f"/users/{user_id}", json={"name": "Robert"})

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == user_id
    assert data["name"] == "Robert"
    assert data["email"] == "b@x.com"


def test_delete_user(client):
    user_id = client.post("/users", json={"name": "Ann", "email": "a@x.com"}).json()["id"]

    response = client.delete(f"/users/{user_id}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/users/{user_id}").status_code == 404
    assert client.get("/users").json() == []


def test_scenario_with_memory_store(memory_client):
    ann = memory_client.post("/users", json={"name": "Ann", "email": "a@x.com"}).json()
    bo = memory_client.post("/users", json={"name": "Bo", "email": "b@x.com"}).json()
    assert ann == {"id": 1, "name": "Ann", "email": "a@x.com"}
    assert bo == {"id": 2, "name": "Bo", "email": "b@x.com"}
    assert memory_client.get("/users").json() == [ann, bo]

    assert memory_client.delete("/users/1").status_code == 204
    assert memory_client.get("/users").json() == [bo]
    assert memory_client.get("/users/1").status_code == 404

    response = memory_client.put("/users/2", json={"name": "Robert"})
    assert response.json() == {"id": 2, "name": "Robert", "email": "b@x.com"}


def test_memory_store_rejects_non_integer_ids(memory_client):
    assert memory_client.get("/users/abc").status_code == 422


def test_memory_store_missing_user(memory_client):
    assert memory_client.get("/users/42").json() == {"detail": "User not found"}

    response = memory_client.put("/users/42", json={"name": "Nobody"})
    assert response.status_code == 404
    assert response.json() == {"detail": "User with id 42 not found"}

    assert memory_client.delete("/users/42").status_code == 204


def test_sqlite_store_missing_user(sqlite_client):
    missing = str(uuid.uuid4())

    assert sqlite_client.get(f"/users/{missing}").status_code == 404

    response = sqlite_client.put(f"/users/{missing}", json={"email": "x@x.com"})
    assert response.status_code == 404
    assert response.json() == {"detail": f"User with id {missing} not found"}

    assert sqlite_client.delete(f"/users/{missing}").status_code == 204


def test_sqlite_store_returns_timestamps(sqlite_client):
    data = sqlite_client.post("/users", json={"name": "Ann", "email": "a@x.com"}).json()

    assert isinstance(data["id"], str)
    assert data["created_at"]
    assert data["updated_at"]


def test_api_prefix():
    app = create_app(Settings(user_store="memory", api_prefix="/api/v1"))

    with TestClient(app) as client:
        assert client.post("/api/v1/users", json={"name": "Ann", "email": "a@x.com"}).status_code == 201
        assert client.get("/api/v1/users/1").json()["name"] == "Ann"


def test_injected_store_is_used():
    store = InMemoryUserStore()
    app = create_app(Settings(), store=store)

    with TestClient(app) as client:
        client.post("/users", json={"name": "Ann", "email": "a@x.com"})

    assert app.state.user_store is store
    assert [user.name for user in asyncio.run(store.list_users())] == ["Ann"]
