"""Tests for RoleRepository."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.auth.models import UserRole
from modules.auth.repository import RoleRepository
from shared.exceptions import ExternalServiceError


@pytest.fixture
def db():
    db = MagicMock()
    query = db.table.return_value
    for method in ("select", "eq", "limit", "insert"):
        getattr(query, method).return_value = query
    return db


class TestRoleRepository:
    def test_get_role(self, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{"role": "landowner"}])

        assert RoleRepository(db).get_role("user-1") == UserRole.LANDOWNER
        db.table.assert_called_with("user_roles")

    def test_get_role_missing(self, db):
        db.table.return_value.execute.return_value = MagicMock(data=[])

        assert RoleRepository(db).get_role("user-1") is None

    def test_insert_role(self, db):
        db.table.return_value.execute.return_value = MagicMock(data=[{}])

        assert RoleRepository(db).insert_role("user-1", UserRole.GARDENER) is True
        db.table.return_value.insert.assert_called_once_with({"user_id": "user-1", "role": "gardener"})

    def test_insert_existing_role_is_kept(self, db):
        db.table.return_value.execute.side_effect = APIError(
            {"message": "duplicate key value", "code": "23505"}
        )

        assert RoleRepository(db).insert_role("user-1", UserRole.GARDENER) is False

    def test_insert_other_failure_propagates(self, db):
        db.table.return_value.execute.side_effect = APIError(
            {"message": "permission denied", "code": "42501"}
        )

        with pytest.raises(ExternalServiceError):
            RoleRepository(db).insert_role("user-1", UserRole.GARDENER)
