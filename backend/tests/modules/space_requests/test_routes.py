"""
Tests for space request API endpoints.

Services are mocked; token validation and error mapping are real.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from datetime import datetime, timezone

from api.app import create_app
from api.dependencies import get_space_request_service
from modules.space_requests.models import (
    Decision,
    RequestProgress,
    RequestStatus,
    SpaceRequest,
    SpaceSummary,
)
from modules.space_requests.exceptions import (
    DuplicateRequestError,
    InvalidStatusTransitionError,
    SpaceOccupiedError,
    SpaceRequestNotFoundError,
    TransitionNotPermittedError,
)

from tests.conftest import GARDENER_ID, LANDOWNER_ID, bearer


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_space_request_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, jwt_auth, mock_service):
    return TestClient(app)


def _request(status=RequestStatus.PENDING) -> SpaceRequest:
    return SpaceRequest(
        id="request-1",
        space_id="space-1",
        gardener_id=GARDENER_ID,
        message="Hello",
        status=status,
        qr_code_token="secret-token",
        created_at=datetime.now(timezone.utc),
        space=SpaceSummary(id="space-1", title="Rooftop", address="1 Lane", owner_id=LANDOWNER_ID),
    )


class TestCreateRequest:
    """Tests for POST /api/space-requests"""

    def test_create_success(self, client, mock_service):
        mock_service.create_request.return_value = _request()

        response = client.post(
            "/api/space-requests",
            json={"space_id": "space-1", "message": "Hello"},
            headers=bearer(GARDENER_ID),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["space"]["title"] == "Rooftop"
        mock_service.create_request.assert_called_once_with("space-1", GARDENER_ID, "Hello")

    def test_token_not_exposed(self, client, mock_service):
        mock_service.create_request.return_value = _request()

        response = client.post(
            "/api/space-requests",
            json={"space_id": "space-1"},
            headers=bearer(GARDENER_ID),
        )

        assert "qr_code_token" not in response.json()
        assert "secret-token" not in response.text

    def test_requires_auth(self, client):
        response = client.post("/api/space-requests", json={"space_id": "space-1"})
        assert response.status_code == 401

    def test_occupied_is_409(self, client, mock_service):
        mock_service.create_request.side_effect = SpaceOccupiedError("space-1")

        response = client.post(
            "/api/space-requests",
            json={"space_id": "space-1"},
            headers=bearer(GARDENER_ID),
        )

        assert response.status_code == 409
        assert response.json()["error"] == "SPACE_OCCUPIED"

    def test_duplicate_is_409(self, client, mock_service):
        mock_service.create_request.side_effect = DuplicateRequestError("space-1", GARDENER_ID, "request-0")

        response = client.post(
            "/api/space-requests",
            json={"space_id": "space-1"},
            headers=bearer(GARDENER_ID),
        )

        assert response.status_code == 409
        assert response.json()["details"]["existing_request_id"] == "request-0"


class TestTransitions:
    def test_decide(self, client, mock_service):
        mock_service.decide.return_value = _request(RequestStatus.APPROVED)

        response = client.post(
            "/api/space-requests/request-1/decision",
            json={"outcome": "approved"},
            headers=bearer(LANDOWNER_ID),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        mock_service.decide.assert_called_once_with("request-1", LANDOWNER_ID, Decision.APPROVED)

    def test_decide_rejects_other_outcomes(self, client, mock_service):
        response = client.post(
            "/api/space-requests/request-1/decision",
            json={"outcome": "completed"},
            headers=bearer(LANDOWNER_ID),
        )

        assert response.status_code == 422
        mock_service.decide.assert_not_called()

    def test_non_owner_decide_is_403(self, client, mock_service):
        mock_service.decide.side_effect = TransitionNotPermittedError("request-1", GARDENER_ID, "approve")

        response = client.post(
            "/api/space-requests/request-1/decision",
            json={"outcome": "approved"},
            headers=bearer(GARDENER_ID),
        )

        assert response.status_code == 403
        assert response.json()["error"] == "TRANSITION_NOT_PERMITTED"

    def test_start(self, client, mock_service):
        mock_service.start.return_value = _request(RequestStatus.ACTIVE)

        response = client.post("/api/space-requests/request-1/start", headers=bearer(GARDENER_ID))

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_complete_twice_is_409(self, client, mock_service):
        mock_service.complete.side_effect = InvalidStatusTransitionError("request-1", "completed", "completed")

        response = client.post("/api/space-requests/request-1/complete", headers=bearer(GARDENER_ID))

        assert response.status_code == 409
        assert response.json()["error"] == "INVALID_TRANSITION"

    def test_unknown_request_is_404(self, client, mock_service):
        mock_service.start.side_effect = SpaceRequestNotFoundError("missing")

        response = client.post("/api/space-requests/missing/start", headers=bearer(GARDENER_ID))

        assert response.status_code == 404


class TestReads:
    def test_list_mine(self, client, mock_service):
        mock_service.list_for_gardener.return_value = [_request()]

        response = client.get("/api/space-requests/mine", headers=bearer(GARDENER_ID))

        assert response.status_code == 200
        assert len(response.json()) == 1
        mock_service.list_for_gardener.assert_called_once_with(GARDENER_ID)

    def test_list_incoming_with_status(self, client, mock_service):
        mock_service.list_incoming.return_value = []

        response = client.get(
            "/api/space-requests/incoming?status=pending",
            headers=bearer(LANDOWNER_ID),
        )

        assert response.status_code == 200
        mock_service.list_incoming.assert_called_once_with(LANDOWNER_ID, RequestStatus.PENDING)

    def test_list_incoming_bad_status(self, client, mock_service):
        response = client.get(
            "/api/space-requests/incoming?status=lost",
            headers=bearer(LANDOWNER_ID),
        )
        assert response.status_code == 422

    def test_get_request(self, client, mock_service):
        mock_service.get_request.return_value = _request()

        response = client.get("/api/space-requests/request-1", headers=bearer(LANDOWNER_ID))

        assert response.status_code == 200
        assert response.json()["id"] == "request-1"

    def test_progress(self, client, mock_service):
        mock_service.get_progress.return_value = RequestProgress(
            request_id="request-1", total_days=10, days_remaining=4, percent=60.0
        )

        response = client.get("/api/space-requests/request-1/progress", headers=bearer(GARDENER_ID))

        assert response.status_code == 200
        assert response.json()["percent"] == 60.0
