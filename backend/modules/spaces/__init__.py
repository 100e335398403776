"""
Spaces module.

Landowner listings: create, edit, browse, soft-remove, delete, images.

Public API:
- ISpaceService: Interface for space operations
- SpaceRepository: also used by the request lifecycle to load spaces
- Space, OwnedSpace, CreateSpaceRequest, UpdateSpaceRequest
"""

from .interfaces import ISpaceService
from .models import (
    CreateSpaceRequest,
    OwnedSpace,
    SetActiveRequest,
    Space,
    UpdateSpaceRequest,
)
from .repository import SpaceRepository
from .exceptions import SpaceNotFoundError, SpaceAccessDeniedError

__all__ = [
    "ISpaceService",
    "CreateSpaceRequest",
    "OwnedSpace",
    "SetActiveRequest",
    "Space",
    "UpdateSpaceRequest",
    "SpaceRepository",
    "SpaceNotFoundError",
    "SpaceAccessDeniedError",
]
