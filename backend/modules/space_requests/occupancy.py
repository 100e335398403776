"""
Space occupancy rule.

At most one request per space is active at a time. A gardener who is already
the active occupant is never blocked by their own request.
"""

import logging
from typing import Optional

from .models import SpaceRequest
from .exceptions import SpaceOccupiedError
from .repository import SpaceRequestRepository

logger = logging.getLogger(__name__)


class OccupancyRule:
    """Rejects operations that would put a second gardener on an occupied space."""

    def __init__(self, repository: SpaceRequestRepository):
        self._repo = repository

    def occupant(self, space_id: str) -> Optional[SpaceRequest]:
        """The active request on a space, if any."""
        return self._repo.find_active_for_space(space_id)

    def ensure_available(self, space_id: str, gardener_id: str) -> None:
        """
        Raises:
            SpaceOccupiedError: If another gardener's request is active on the space
        """
        active = self.occupant(space_id)
        if active is not None and active.gardener_id != gardener_id:
            logger.info(
                "Space %s occupied by request %s; refusing gardener %s",
                space_id,
                active.id,
                gardener_id,
            )
            raise SpaceOccupiedError(space_id)
