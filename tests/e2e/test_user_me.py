"""End-to-end tests for the current user endpoint."""

import pytest
from fastapi.testclient import TestClient

from lingo.interface.api.app import create_app
from tests.di import build_test_container
from tests.harness import MODERATOR_EMAIL, auth_headers, make_token


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(container=build_test_container()))


class TestCurrentUser:
    """Tests for GET /users/me."""

    def test_learner_on_first_login(self, client):
        response = client.get(
            "/users/me", headers=auth_headers(make_token("luna@example.com"))
        )

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "luna@example.com"
        assert data["role"] == "LEARNER"
        assert data["can_contribute"] is False
        assert data["onboarding_completed"] is False

    def test_seed_moderator(self, client):
        response = client.get(
            "/users/me", headers=auth_headers(make_token(MODERATOR_EMAIL))
        )

        assert response.json()["role"] == "MODERATOR"
        assert response.json()["can_moderate"] is True

    def test_missing_token(self, client):
        assert client.get("/users/me").status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/users/me", headers=auth_headers("not-a-jwt"))

        assert response.status_code == 401

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["environment"] == "test"


class TestUpdateCurrentUser:
    """Tests for PATCH /users/me."""

    def test_learner_becomes_contributor_and_can_submit(self, client):
        """Onboarding as CONTRIBUTOR unlocks submitting terms."""
        # Arrange
        headers = auth_headers(make_token("luna@example.com"))
        before = client.post(
            "/contents",
            json={"term": "Rizz", "definition": "Charm"},
            headers=headers,
        )

        # Act
        response = client.patch(
            "/users/me",
            json={"displayName": "Luna", "roleIntent": "CONTRIBUTOR"},
            headers=headers,
        )
        after = client.post(
            "/contents",
            json={"term": "Rizz", "definition": "Charm"},
            headers=headers,
        )

        # Assert
        assert before.status_code == 403
        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Luna"
        assert data["role"] == "CONTRIBUTOR"
        assert data["can_contribute"] is True
        assert data["onboarding_completed"] is True
        assert after.status_code == 201
        assert client.get("/users/me", headers=headers).json()["role"] == (
            "CONTRIBUTOR"
        )

    def test_snake_case_body_is_accepted(self, client):
        response = client.patch(
            "/users/me",
            json={"display_name": "Kai"},
            headers=auth_headers(make_token("kai@example.com")),
        )

        assert response.status_code == 200
        assert response.json()["role"] == "LEARNER"
        assert response.json()["onboarding_completed"] is True

    def test_moderator_intent_is_rejected(self, client):
        headers = auth_headers(make_token("kai@example.com"))

        response = client.patch(
            "/users/me",
            json={"displayName": "Kai", "roleIntent": "MODERATOR"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["field"] == "role_intent"
        assert client.get("/users/me", headers=headers).json()["role"] == "LEARNER"

    def test_moderator_keeps_role(self, client):
        response = client.patch(
            "/users/me",
            json={"displayName": "Mod", "roleIntent": "LEARNER"},
            headers=auth_headers(make_token(MODERATOR_EMAIL)),
        )

        assert response.status_code == 200
        assert response.json()["role"] == "MODERATOR"

    def test_short_display_name_is_rejected(self, client):
        response = client.patch(
            "/users/me",
            json={"displayName": " L "},
            headers=auth_headers(make_token("luna@example.com")),
        )

        assert response.status_code == 400
        assert response.json()["field"] == "display_name"

    def test_missing_token(self, client):
        response = client.patch("/users/me", json={"displayName": "Luna"})

        assert response.status_code == 401
