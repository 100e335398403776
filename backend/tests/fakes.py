"""
In-memory stand-ins for the Supabase-backed repositories.

They keep the same method signatures as the real repositories so services
can be exercised end to end without a database. The request store applies
the same conditional-update rule as the real table: a transition only
lands if the row is still in the expected status.
"""

import itertools
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, Optional

from modules.auth.models import UserRole
from modules.auth.exceptions import InsufficientPermissionsError, RoleNotAssignedError
from modules.profiles.models import Profile
from modules.space_requests.models import OPEN_STATUSES, RequestStatus, SpaceRequest, SpaceSummary
from modules.spaces.models import Space

BASE_TIME = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_space(
    space_id: str = "space-1",
    owner_id: str = "landowner-1",
    title: str = "Rooftop beds",
    address: str = "1 Garden Lane",
    is_active: bool = True,
    available_to: Optional[date] = None,
) -> Space:
    return Space(
        id=space_id,
        owner_id=owner_id,
        title=title,
        address=address,
        is_active=is_active,
        available_to=available_to,
        created_at=BASE_TIME,
    )


class FakeSpaceRepository:
    def __init__(self, spaces: Iterable[Space] = ()):
        self.spaces = {s.id: s for s in spaces}

    def add(self, space: Space) -> Space:
        self.spaces[space.id] = space
        return space

    def get_by_id(self, space_id: str) -> Optional[Space]:
        return self.spaces.get(space_id)

    def list_by_owner(self, owner_id: str) -> list[Space]:
        return [s for s in self.spaces.values() if s.owner_id == owner_id]


class FakeProfileRepository:
    def __init__(self, names: Optional[dict[str, str]] = None):
        self.names = dict(names or {})

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        if user_id not in self.names:
            return None
        return Profile(id=user_id, name=self.names[user_id])

    def get_names(self, user_ids: Iterable[str]) -> dict[str, Optional[str]]:
        return {uid: self.names[uid] for uid in set(user_ids) if uid in self.names}


class FakeAuthService:
    """Only the role lookups the feature services use."""

    def __init__(self, roles: Optional[dict[str, UserRole]] = None):
        self.roles = dict(roles or {})

    async def get_role(self, user_id: str) -> Optional[UserRole]:
        return self.roles.get(user_id)

    async def require_role(self, user_id: str, role: UserRole) -> UserRole:
        actual = self.roles.get(user_id)
        if actual is None:
            raise RoleNotAssignedError(user_id)
        if actual != role:
            raise InsufficientPermissionsError(role.value, actual.value)
        return actual


class FakeSpaceRequestRepository:
    """Request table with conditional updates and write counting."""

    def __init__(self, spaces: FakeSpaceRepository):
        self._spaces = spaces
        self.rows: dict[str, dict[str, Any]] = {}
        self.writes = 0
        self._ids = itertools.count(1)
        self._clock = itertools.count()

    def _tick(self) -> datetime:
        return BASE_TIME + timedelta(seconds=next(self._clock))

    def _to_model(self, row: dict[str, Any], with_space: bool = True) -> SpaceRequest:
        space = self._spaces.get_by_id(row["space_id"]) if with_space else None
        summary = None
        if space is not None:
            summary = SpaceSummary(
                id=space.id,
                title=space.title,
                address=space.address,
                owner_id=space.owner_id,
                available_to=space.available_to,
            )
        return SpaceRequest(**row, space=summary)

    def create(self, data: dict[str, Any]) -> SpaceRequest:
        request_id = f"request-{next(self._ids)}"
        now = self._tick()
        row = {
            "id": request_id,
            "message": None,
            "qr_code_token": None,
            "created_at": now,
            "updated_at": now,
            "started_at": None,
            "completed_at": None,
            **data,
        }
        self.rows[request_id] = row
        self.writes += 1
        return self._to_model(row, with_space=False)

    def get_by_id(self, request_id: str) -> Optional[SpaceRequest]:
        row = self.rows.get(request_id)
        return self._to_model(row) if row else None

    def get_by_token(self, token: str) -> Optional[SpaceRequest]:
        for row in self.rows.values():
            if row["qr_code_token"] == token:
                return self._to_model(row)
        return None

    def find_open_for_pair(self, space_id: str, gardener_id: str) -> Optional[SpaceRequest]:
        for row in self.rows.values():
            if (
                row["space_id"] == space_id
                and row["gardener_id"] == gardener_id
                and RequestStatus(row["status"]) in OPEN_STATUSES
            ):
                return self._to_model(row, with_space=False)
        return None

    def find_active_for_space(self, space_id: str) -> Optional[SpaceRequest]:
        for row in self.rows.values():
            if row["space_id"] == space_id and row["status"] == RequestStatus.ACTIVE.value:
                return self._to_model(row, with_space=False)
        return None

    def list_for_gardener(self, gardener_id: str) -> list[SpaceRequest]:
        rows = [r for r in self.rows.values() if r["gardener_id"] == gardener_id]
        return [self._to_model(r) for r in sorted(rows, key=lambda r: r["created_at"], reverse=True)]

    def list_for_spaces(
        self,
        space_ids: Iterable[str],
        status: Optional[RequestStatus] = None,
    ) -> list[SpaceRequest]:
        ids = set(space_ids)
        rows = [
            r for r in self.rows.values()
            if r["space_id"] in ids and (status is None or r["status"] == status.value)
        ]
        return [self._to_model(r) for r in sorted(rows, key=lambda r: r["created_at"], reverse=True)]

    def count_pending_by_space(self, space_ids: Iterable[str]) -> dict[str, int]:
        counts: dict[str, int] = {}
        ids = set(space_ids)
        for row in self.rows.values():
            if row["space_id"] in ids and row["status"] == RequestStatus.PENDING.value:
                counts[row["space_id"]] = counts.get(row["space_id"], 0) + 1
        return counts

    def transition(
        self,
        request_id: str,
        expected: RequestStatus,
        target: RequestStatus,
        fields: Optional[dict[str, Any]] = None,
    ) -> Optional[SpaceRequest]:
        row = self.rows.get(request_id)
        if row is None or row["status"] != expected.value:
            return None
        row.update(fields or {})
        row["status"] = target.value
        row["updated_at"] = self._tick()
        self.writes += 1
        return self._to_model(row, with_space=False)

    def force_status(self, request_id: str, status: RequestStatus) -> None:
        """Simulate a concurrent writer."""
        self.rows[request_id]["status"] = status.value
