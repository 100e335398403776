"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from shared.models import AuthenticatedUser


MIN_PASSWORD_LENGTH = 6


class UserRole(str, Enum):
    """Marketplace role, assigned once at sign-up."""

    LANDOWNER = "landowner"  # Lists spaces, decides on requests
    GARDENER = "gardener"    # Browses spaces, submits requests


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="Postgres role claim")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


class SignUpRequest(BaseModel):
    """Request to register a new account with a marketplace role."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Password (at least 6 characters)")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    role: UserRole = Field(..., description="Marketplace role")


class SignInRequest(BaseModel):
    """Email/password sign-in."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class AuthSession(BaseModel):
    """Tokens and identity returned after sign-in."""

    user_id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    access_token: Optional[str] = Field(None, description="JWT access token")
    refresh_token: Optional[str] = Field(None, description="Refresh token")
    expires_at: Optional[int] = Field(None, description="Access token expiry (epoch seconds)")
    role: Optional[UserRole] = Field(None, description="Resolved marketplace role")


class SignUpResult(BaseModel):
    """Outcome of a sign-up."""

    user_id: str = Field(..., description="New user ID")
    email: str = Field(..., description="Email address")
    role: UserRole = Field(..., description="Assigned role")
    email_confirmation_required: bool = Field(
        ...,
        description="True when the account must confirm its email before signing in",
    )
    session: Optional[AuthSession] = Field(None, description="Session if signed in immediately")


class AuthState(BaseModel):
    """Snapshot of the identity/session/role triple held by AuthContext."""

    user: Optional[AuthenticatedUser] = None
    access_token: Optional[str] = None
    role: Optional[UserRole] = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_complete(self) -> bool:
        """A signed-in user without a role row is an incomplete account."""
        return self.user is not None and self.role is not None
