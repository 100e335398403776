"""Tests for health check endpoints."""

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
from fastapi.testclient import TestClient

from api import create_app
from shared.exceptions import ExternalServiceError


@pytest.fixture
def client():
    return TestClient(create_app())


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_ready_when_database_answers(self, client):
        container = MagicMock()
        container.space_repository.list_by_owner.return_value = []

        with patch("api.routes.health.get_container", return_value=container):
            response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}

    def test_not_ready_when_database_fails(self, client):
        container = MagicMock()
        container.space_repository.list_by_owner.side_effect = ExternalServiceError("down", service="supabase")

        with patch("api.routes.health.get_container", return_value=container):
            response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "not_ready", "database": "unavailable"}

    def test_not_ready_without_configuration(self, client):
        container = MagicMock()
        type(container).space_repository = PropertyMock(
            side_effect=RuntimeError("Supabase configuration missing")
        )

        with patch("api.routes.health.get_container", return_value=container):
            response = client.get("/api/ready")

        assert response.json()["status"] == "not_ready"
