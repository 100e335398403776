"""
Profiles module.

Per-user display data (name, location, avatar).

Public API:
- IProfileService: Interface for profile operations
- ProfileRepository: also used by other modules to resolve display names
- Profile, UpdateProfileRequest
"""

from .interfaces import IProfileService
from .models import Profile, UpdateProfileRequest
from .repository import ProfileRepository
from .exceptions import ProfileNotFoundError

__all__ = [
    "IProfileService",
    "Profile",
    "UpdateProfileRequest",
    "ProfileRepository",
    "ProfileNotFoundError",
]
