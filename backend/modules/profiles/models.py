"""
Profiles module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Profile(BaseModel):
    """Per-user display data."""

    id: str = Field(..., description="User ID (same as auth user)")
    name: Optional[str] = Field(None, description="Display name")
    location: Optional[str] = Field(None, description="Free-text location")
    avatar_url: Optional[str] = Field(None, description="Public avatar URL")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class UpdateProfileRequest(BaseModel):
    """Fields a user may change on their own profile."""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    location: Optional[str] = Field(None, max_length=500, description="Location")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value
