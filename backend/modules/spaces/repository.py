"""
Space repository for the urban_farm_spaces table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Space, SpaceFields
from .exceptions import SpaceNotFoundError

TABLE = "urban_farm_spaces"


class SpaceRepository(BaseRepository[Space]):
    """
    Repository for space data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def create(self, owner_id: str, fields: SpaceFields) -> Space:
        data = {
            **self._fields_to_row(fields),
            "owner_id": owner_id,
            "is_active": True,
        }
        result = self._execute(self._db.table(TABLE).insert(data), "create_space")
        return self._map_to_space(result.data[0])

    def get_by_id(self, space_id: str) -> Optional[Space]:
        rows = self._find_rows(
            self._db.table(TABLE).select("*").eq("id", space_id).limit(1),
            "get_space",
        )
        if not rows:
            return None
        return self._map_to_space(rows[0])

    def list_active(self) -> list[Space]:
        """All listed spaces, newest first."""
        result = self._execute(
            self._db.table(TABLE).select("*").eq("is_active", True).order("created_at", desc=True),
            "list_active_spaces",
        )
        return [self._map_to_space(row) for row in result.data]

    def list_by_owner(self, owner_id: str) -> list[Space]:
        """All of an owner's spaces, listed or not, newest first."""
        result = self._execute(
            self._db.table(TABLE).select("*").eq("owner_id", owner_id).order("created_at", desc=True),
            "list_owner_spaces",
        )
        return [self._map_to_space(row) for row in result.data]

    def update_fields(self, space_id: str, fields: SpaceFields) -> Space:
        return self._update(space_id, self._fields_to_row(fields), "update_space")

    def set_active(self, space_id: str, is_active: bool) -> Space:
        return self._update(space_id, {"is_active": is_active}, "set_space_active")

    def set_image(self, space_id: str, image_url: str) -> Space:
        return self._update(space_id, {"image_url": image_url}, "set_space_image")

    def delete(self, space_id: str) -> None:
        """Hard delete. Requests and chat rows go with it via CASCADE."""
        self._execute(self._db.table(TABLE).delete().eq("id", space_id), "delete_space")

    def _update(self, space_id: str, data: dict[str, Any], operation: str) -> Space:
        data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(self._db.table(TABLE).update(data).eq("id", space_id), operation)
        if not result.data:
            raise SpaceNotFoundError(space_id)
        return self._map_to_space(result.data[0])

    def _fields_to_row(self, fields: SpaceFields) -> dict[str, Any]:
        return fields.model_dump(mode="json")

    def _map_to_space(self, data: dict[str, Any]) -> Space:
        """Map database row to Space model."""
        return Space(
            id=str(data["id"]),
            owner_id=str(data["owner_id"]),
            title=data["title"],
            address=data["address"],
            description=data.get("description"),
            area_size=data.get("area_size"),
            farm_type=data.get("farm_type"),
            available_from=data.get("available_from"),
            available_to=data.get("available_to"),
            amenities=data.get("amenities") or [],
            rules=data.get("rules"),
            image_url=data.get("image_url"),
            is_active=data.get("is_active", True),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )
