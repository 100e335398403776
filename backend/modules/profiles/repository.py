"""
Profile repository for the profiles table.
"""

from datetime import datetime, timezone
from typing import Optional, Any, Iterable

from shared.repository import BaseRepository
from .models import Profile


class ProfileRepository(BaseRepository[Profile]):
    """Data access for profiles. Other modules use it to resolve display names."""

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        rows = self._find_rows(
            self._db.table("profiles").select("*").eq("id", user_id).limit(1),
            "get_profile",
        )
        if not rows:
            return None
        return self._map_to_profile(rows[0])

    def get_names(self, user_ids: Iterable[str]) -> dict[str, Optional[str]]:
        """
        Resolve display names for a set of users in one query.

        Returns:
            Mapping of user ID to name; users without a profile are absent.
        """
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        result = self._execute(
            self._db.table("profiles").select("id, name").in_("id", ids),
            "get_profile_names",
        )
        return {str(row["id"]): row.get("name") for row in result.data}

    def upsert(self, user_id: str, fields: dict[str, Any]) -> Profile:
        data = {
            **fields,
            "id": user_id,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._execute(
            self._db.table("profiles").upsert(data),
            "upsert_profile",
        )
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model."""
        return Profile(
            id=str(data["id"]),
            name=data.get("name"),
            location=data.get("location"),
            avatar_url=data.get("avatar_url"),
            updated_at=data.get("updated_at"),
        )
