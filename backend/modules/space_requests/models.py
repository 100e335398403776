"""
Space request module data models.

A space request is a gardener's ask to use a landowner's space. Its status
follows the lifecycle in lifecycle.py.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class RequestStatus(str, Enum):
    """Request lifecycle status."""

    PENDING = "pending"      # Waiting for the owner's decision
    APPROVED = "approved"    # Owner agreed; gardener has not started yet
    REJECTED = "rejected"    # Owner declined (terminal)
    ACTIVE = "active"        # Gardener is using the space
    COMPLETED = "completed"  # Use has ended (terminal)

    @property
    def is_terminal(self) -> bool:
        return self in (RequestStatus.REJECTED, RequestStatus.COMPLETED)


OPEN_STATUSES = (RequestStatus.PENDING, RequestStatus.APPROVED, RequestStatus.ACTIVE)


class Decision(str, Enum):
    """Owner's decision on a pending request."""

    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def status(self) -> RequestStatus:
        return RequestStatus(self.value)


class SubmitSpaceRequest(BaseModel):
    """Request body for asking to use a space."""

    space_id: str = Field(..., min_length=1, description="Space to request")
    message: Optional[str] = Field(None, max_length=2000, description="Note to the landowner")


class DecisionRequest(BaseModel):
    """Request body for approving or rejecting."""

    outcome: Decision = Field(..., description="approved or rejected")


class SpaceSummary(BaseModel):
    """The parts of a space a request needs."""

    id: str
    title: str
    address: str
    owner_id: str
    available_to: Optional[date] = None


class SpaceRequest(BaseModel):
    """A request with its joined space."""

    id: str = Field(..., description="Request ID (UUID)")
    space_id: str = Field(..., description="Requested space")
    gardener_id: str = Field(..., description="Requesting gardener")
    message: Optional[str] = Field(None, description="Note to the landowner")
    status: RequestStatus = Field(..., description="Lifecycle status")

    # Only ever handed out through the access credential endpoint
    qr_code_token: Optional[str] = Field(None, exclude=True)

    created_at: datetime = Field(..., description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")
    started_at: Optional[datetime] = Field(None, description="When use started")
    completed_at: Optional[datetime] = Field(None, description="When use ended")

    space: Optional[SpaceSummary] = Field(None, description="Requested space")
    gardener_name: Optional[str] = Field(None, description="Gardener display name")


class RequestProgress(BaseModel):
    """How far a request's occupancy period has run."""

    request_id: str = Field(..., description="Request ID")
    total_days: int = Field(..., ge=0, description="Days from start to the space's last available day")
    days_remaining: int = Field(..., ge=0, description="Days left")
    percent: float = Field(..., ge=0, le=100, description="Elapsed share of the period")
