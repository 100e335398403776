"""
Role repository for the user_roles table.
"""

import logging
from typing import Optional

from shared.exceptions import ExternalServiceError
from shared.repository import BaseRepository
from .models import UserRole

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class RoleRepository(BaseRepository[UserRole]):
    """Reads and writes the single role row of each user."""

    def get_role(self, user_id: str) -> Optional[UserRole]:
        result = self._execute(
            self._db.table("user_roles").select("role").eq("user_id", user_id).limit(1),
            "get_role",
        )
        if not result.data:
            return None
        return UserRole(result.data[0]["role"])

    def insert_role(self, user_id: str, role: UserRole) -> bool:
        """
        Insert the role row for a user.

        Returns:
            True if inserted, False if the user already had a role row.
        """
        try:
            self._execute(
                self._db.table("user_roles").insert({"user_id": user_id, "role": role.value}),
                "insert_role",
            )
        except ExternalServiceError as e:
            if e.details.get("remote_code") == UNIQUE_VIOLATION:
                logger.info("User %s already has a role, keeping it", user_id)
                return False
            raise
        return True
