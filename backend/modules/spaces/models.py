"""
Spaces module data models.

A space is a landowner's listed plot. Listings are soft-removable through
``is_active``; inactive spaces are hidden from browsing but keep their
request history.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class SpaceFields(BaseModel):
    """Editable listing fields shared by create and update."""

    title: str = Field(..., max_length=200, description="Listing title")
    address: str = Field(..., max_length=500, description="Street address")
    description: Optional[str] = Field(None, max_length=5000, description="Description")
    area_size: Optional[str] = Field(None, max_length=100, description="Area, e.g. '20 sqm'")
    farm_type: Optional[str] = Field(None, max_length=100, description="Farm type, e.g. 'raised beds'")
    available_from: Optional[date] = Field(None, description="First available day")
    available_to: Optional[date] = Field(None, description="Last available day")
    amenities: list[str] = Field(default_factory=list, description="Amenities (water, tools, ...)")
    rules: Optional[str] = Field(None, max_length=5000, description="House rules")

    @field_validator("title", "address")
    @classmethod
    def _required_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("amenities")
    @classmethod
    def _dedupe_amenities(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for item in value:
            item = item.strip()
            if item and item not in seen:
                seen.append(item)
        return seen

    @model_validator(mode="after")
    def _check_date_range(self) -> "SpaceFields":
        if self.available_from and self.available_to and self.available_to < self.available_from:
            raise ValueError("available_to must not be before available_from")
        return self


class CreateSpaceRequest(SpaceFields):
    """Request to list a new space."""


class UpdateSpaceRequest(SpaceFields):
    """Request to replace a space's listing fields."""


class SetActiveRequest(BaseModel):
    """Show or hide a listing."""

    is_active: bool = Field(..., description="Whether the space is listed")


class Space(BaseModel):
    """A listed space."""

    id: str = Field(..., description="Space ID (UUID)")
    owner_id: str = Field(..., description="Landowner user ID")
    title: str = Field(..., description="Listing title")
    address: str = Field(..., description="Street address")
    description: Optional[str] = Field(None, description="Description")
    area_size: Optional[str] = Field(None, description="Area")
    farm_type: Optional[str] = Field(None, description="Farm type")
    available_from: Optional[date] = Field(None, description="First available day")
    available_to: Optional[date] = Field(None, description="Last available day")
    amenities: list[str] = Field(default_factory=list, description="Amenities")
    rules: Optional[str] = Field(None, description="House rules")
    image_url: Optional[str] = Field(None, description="Public image URL")
    is_active: bool = Field(default=True, description="Whether the space is listed")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    # Joined display data
    owner_name: Optional[str] = Field(None, description="Owner display name")
    owner_location: Optional[str] = Field(None, description="Owner location")


class OwnedSpace(Space):
    """A space on its owner's dashboard."""

    pending_requests: int = Field(default=0, description="Requests awaiting a decision")
