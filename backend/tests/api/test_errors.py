"""Tests for the FarmShareError to HTTP mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.errors import setup_exception_handlers, status_code_for
from modules.space_requests.exceptions import InvalidStatusTransitionError, SpaceOccupiedError
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    FarmShareError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("x"), 404),
        (AuthenticationError("x"), 401),
        (AuthorizationError("x"), 403),
        (ValidationError("x"), 400),
        (ConflictError("x"), 409),
        (InvalidStatusTransitionError("r-1", "completed", "active"), 409),
        (ExternalServiceError("x", service="supabase"), 502),
        (FarmShareError("x"), 500),
    ],
)
def test_status_code_for(error, status_code):
    assert status_code_for(error) == status_code


@pytest.fixture
def client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/occupied")
    async def occupied():
        raise SpaceOccupiedError("space-1")

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise AuthenticationError("nope", code="MISSING_TOKEN")

    return TestClient(app)


class TestHandler:
    def test_error_body(self, client):
        response = client.get("/occupied")

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "SPACE_OCCUPIED"
        assert set(body) == {"error", "message", "details"}

    def test_authentication_sets_challenge_header(self, client):
        response = client.get("/unauthenticated")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
