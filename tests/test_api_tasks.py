"""
Tests for the tasks API endpoints.

FastAPI routes run against in-memory repositories (see ``conftest.py``).
Validates status codes, response bodies, error mapping and headers.
"""

import pytest

from todoapp.interfaces.tasks.schemas import TaskResponse

API = "/api/v1"


@pytest.fixture
def owner(client) -> dict:
    """A user with a category and a tag, created through the API."""
    user = client.post(f"{API}/users", json={"name": "Test User", "email": "test@example.com"}).json()
    category = client.post(f"{API}/categories", json={"name": "Home", "user_id": user["id"]}).json()
    tag = client.post(f"{API}/tags", json={"name": "urgent", "user_id": user["id"]}).json()
    return {"user": user, "category": category, "tag": tag}


def _task_payload(owner: dict, **overrides) -> dict:
    payload = {
        "title": "Buy milk",
        "user_id": owner["user"]["id"],
        "category_id": owner["category"]["id"],
    }
    payload.update(overrides)
    return payload


class TestCatalogEndpoints:
    """Tests for /users, /categories and /tags."""

    def test_create_and_get_user(self, client) -> None:
        response = client.post(f"{API}/users", json={"name": "Ana", "email": "ana@example.com"})
        assert response.status_code == 201
        user = response.json()

        fetched = client.get(f"{API}/users/{user['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == user

    def test_missing_user_returns_404(self, client) -> None:
        response = client.get(f"{API}/users/999")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found: 999"}

    def test_invalid_email_rejected(self, client) -> None:
        response = client.post(f"{API}/users", json={"name": "Ana", "email": "not-an-email"})
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("email:")

    def test_category_for_missing_user_returns_404(self, client) -> None:
        response = client.post(f"{API}/categories", json={"name": "Home", "user_id": 999})
        assert response.status_code == 404

    def test_blank_tag_name_returns_400(self, client, owner) -> None:
        response = client.post(f"{API}/tags", json={"name": "  ", "user_id": owner["user"]["id"]})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid tag name: must not be blank"}


class TestCreateTaskEndpoint:
    """Tests for POST /api/v1/tasks."""

    def test_create_task(self, client, owner) -> None:
        response = client.post(
            f"{API}/tasks", json=_task_payload(owner, tag_ids=[owner["tag"]["id"]])
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["title"] == "Buy milk"
        assert body["done"] is False
        assert body["canceled_at"] is None
        assert body["tags"] == ["urgent"]
        assert body["location"] is None

    def test_create_task_with_location(self, client, owner) -> None:
        location = {"latitude": 38.72, "longitude": -9.14, "name": "Market", "description": None}
        response = client.post(f"{API}/tasks", json=_task_payload(owner, location=location))
        assert response.status_code == 201
        assert response.json()["location"] == location

    def test_empty_title_returns_field_errors(self, client, owner) -> None:
        response = client.post(f"{API}/tasks", json=_task_payload(owner, title=""))
        assert response.status_code == 400
        assert len(response.json()["errors"]) == 1
        assert response.json()["errors"][0].startswith("title:")

    def test_missing_fields_return_one_message_each(self, client) -> None:
        response = client.post(f"{API}/tasks", json={})
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert [e.split(":")[0] for e in errors] == ["title", "user_id", "category_id"]

    def test_whitespace_title_returns_single_message(self, client, owner) -> None:
        response = client.post(f"{API}/tasks", json=_task_payload(owner, title="   "))
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid task title: must not be blank"}

    def test_missing_user_returns_404(self, client, owner, repos) -> None:
        response = client.post(f"{API}/tasks", json=_task_payload(owner, user_id=999))
        assert response.status_code == 404
        assert response.json() == {"error": "User not found: 999"}
        assert len(repos.tasks) == 0

    def test_missing_tag_returns_404(self, client, owner) -> None:
        response = client.post(f"{API}/tasks", json=_task_payload(owner, tag_ids=[999]))
        assert response.status_code == 404
        assert response.json() == {"error": "Tag not found: 999"}


class TestTaskLifecycleEndpoints:
    """Tests for GET/PATCH on /api/v1/tasks/{id}."""

    def test_get_task(self, client, owner) -> None:
        created = client.post(f"{API}/tasks", json=_task_payload(owner)).json()
        response = client.get(f"{API}/tasks/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_task_returns_404(self, client) -> None:
        response = client.get(f"{API}/tasks/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Task not found: 999"}

    def test_toggle_missing_task_returns_404(self, client) -> None:
        assert client.patch(f"{API}/tasks/999/toggle").status_code == 404

    def test_cancel_missing_task_returns_404(self, client) -> None:
        assert client.patch(f"{API}/tasks/999/cancel").status_code == 404

    def test_create_toggle_cancel_flow(self, client, owner) -> None:
        created = client.post(f"{API}/tasks", json=_task_payload(owner)).json()
        task_url = f"{API}/tasks/{created['id']}"

        toggled = client.patch(f"{task_url}/toggle")
        assert toggled.status_code == 200
        assert toggled.json()["done"] is True

        cancelled = client.patch(f"{task_url}/cancel")
        assert cancelled.status_code == 204
        assert cancelled.content == b""

        final = client.get(task_url).json()
        assert final["canceled_at"] is not None
        assert final["done"] is True

        again = client.patch(f"{task_url}/cancel")
        assert again.status_code == 204
        assert client.get(task_url).json()["canceled_at"] == final["canceled_at"]

    def test_list_active_tasks(self, client, owner) -> None:
        first = client.post(f"{API}/tasks", json=_task_payload(owner, title="One")).json()
        second = client.post(f"{API}/tasks", json=_task_payload(owner, title="Two")).json()
        client.patch(f"{API}/tasks/{second['id']}/cancel")

        response = client.get(f"{API}/tasks", params={"user_id": owner["user"]["id"]})

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [first["id"]]

    def test_list_for_missing_user_returns_404(self, client) -> None:
        assert client.get(f"{API}/tasks", params={"user_id": 999}).status_code == 404


class TestUnexpectedErrors:
    """Tests for the catch-all 500 handler."""

    def test_repository_failure_returns_500(self, client, repos, monkeypatch) -> None:
        def broken(_task_id):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(repos.tasks, "get_by_id", broken)

        response = client.get(f"{API}/tasks/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error: connection reset"}

    def test_500_response_carries_security_headers(self, client, repos, monkeypatch) -> None:
        def broken(_task_id):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(repos.tasks, "get_by_id", broken)

        response = client.get(f"{API}/tasks/1")

        assert response.status_code == 500
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    def test_model_validation_failure_returns_500(self, client, repos, monkeypatch) -> None:
        def corrupt(_task_id):
            return TaskResponse.model_validate({"id": 1})

        monkeypatch.setattr(repos.tasks, "get_by_id", corrupt)

        response = client.get(f"{API}/tasks/1")

        assert response.status_code == 500
        assert response.json()["error"].startswith("Internal server error: ")


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get(f"{API}/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    def test_headers_on_error_responses(self, client) -> None:
        response = client.get(f"{API}/tasks/999")
        assert response.headers["X-Frame-Options"] == "DENY"
