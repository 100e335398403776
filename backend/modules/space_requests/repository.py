"""
Space request repository for the space_requests table.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Optional, Any, Iterable

from shared.repository import BaseRepository
from .models import OPEN_STATUSES, RequestStatus, SpaceRequest, SpaceSummary

TABLE = "space_requests"

# Requests are always read together with the space they are for
SELECT_WITH_SPACE = "*, urban_farm_spaces(id, title, address, owner_id, available_to)"


class SpaceRequestRepository(BaseRepository[SpaceRequest]):
    """
    Repository for space request data access.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may read or move a request.
    """

    def create(self, data: dict[str, Any]) -> SpaceRequest:
        result = self._execute(self._db.table(TABLE).insert(data), "create_request")
        return self._map_to_request(result.data[0])

    def get_by_id(self, request_id: str) -> Optional[SpaceRequest]:
        rows = self._find_rows(
            self._db.table(TABLE).select(SELECT_WITH_SPACE).eq("id", request_id).limit(1),
            "get_request",
        )
        if not rows:
            return None
        return self._map_to_request(rows[0])

    def get_by_token(self, token: str) -> Optional[SpaceRequest]:
        result = self._execute(
            self._db.table(TABLE).select(SELECT_WITH_SPACE).eq("qr_code_token", token).limit(1),
            "get_request_by_token",
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def find_open_for_pair(self, space_id: str, gardener_id: str) -> Optional[SpaceRequest]:
        """The gardener's pending, approved or active request on a space, if any."""
        result = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("space_id", space_id)
            .eq("gardener_id", gardener_id)
            .in_("status", [s.value for s in OPEN_STATUSES])
            .limit(1),
            "find_open_request",
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def find_active_for_space(self, space_id: str) -> Optional[SpaceRequest]:
        result = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("space_id", space_id)
            .eq("status", RequestStatus.ACTIVE.value)
            .limit(1),
            "find_active_request",
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def list_for_gardener(self, gardener_id: str) -> list[SpaceRequest]:
        """A gardener's requests, newest first."""
        result = self._execute(
            self._db.table(TABLE)
            .select(SELECT_WITH_SPACE)
            .eq("gardener_id", gardener_id)
            .order("created_at", desc=True),
            "list_gardener_requests",
        )
        return [self._map_to_request(row) for row in result.data]

    def list_for_spaces(
        self,
        space_ids: Iterable[str],
        status: Optional[RequestStatus] = None,
    ) -> list[SpaceRequest]:
        """Requests on any of the given spaces, newest first."""
        ids = sorted(set(space_ids))
        if not ids:
            return []
        query = self._db.table(TABLE).select(SELECT_WITH_SPACE).in_("space_id", ids)
        if status is not None:
            query = query.eq("status", status.value)
        result = self._execute(query.order("created_at", desc=True), "list_space_requests")
        return [self._map_to_request(row) for row in result.data]

    def count_pending_by_space(self, space_ids: Iterable[str]) -> dict[str, int]:
        """Pending request count per space; spaces with none are absent."""
        ids = sorted(set(space_ids))
        if not ids:
            return {}
        result = self._execute(
            self._db.table(TABLE)
            .select("space_id")
            .in_("space_id", ids)
            .eq("status", RequestStatus.PENDING.value),
            "count_pending_requests",
        )
        return dict(Counter(str(row["space_id"]) for row in result.data))

    def transition(
        self,
        request_id: str,
        expected: RequestStatus,
        target: RequestStatus,
        fields: Optional[dict[str, Any]] = None,
    ) -> Optional[SpaceRequest]:
        """
        Move a request to ``target`` only if it is still in ``expected``.

        The status check is part of the UPDATE filter, so of two concurrent
        callers at most one sees a row come back.

        Returns:
            The updated request (without its joined space), or None if the
            request no longer exists or has already left ``expected``.
        """
        data = {
            **(fields or {}),
            "status": target.value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(
            self._db.table(TABLE)
            .update(data)
            .eq("id", request_id)
            .eq("status", expected.value),
            f"transition_request_{target.value}",
        )
        if not result.data:
            return None
        return self._map_to_request(result.data[0])

    def _map_to_request(self, data: dict[str, Any]) -> SpaceRequest:
        """Map database row (optionally with the joined space) to SpaceRequest."""
        space = data.get("urban_farm_spaces")
        return SpaceRequest(
            id=str(data["id"]),
            space_id=str(data["space_id"]),
            gardener_id=str(data["gardener_id"]),
            message=data.get("message"),
            status=RequestStatus(data["status"]),
            qr_code_token=data.get("qr_code_token"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            started_at=data.get("started_at"),
            completed_at=data.get("completed_at"),
            space=self._map_to_summary(space, data["space_id"]) if space else None,
        )

    def _map_to_summary(self, data: dict[str, Any], space_id: Any) -> SpaceSummary:
        return SpaceSummary(
            id=str(data.get("id") or space_id),
            title=data["title"],
            address=data["address"],
            owner_id=str(data["owner_id"]),
            available_to=data.get("available_to"),
        )
