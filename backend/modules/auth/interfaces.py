"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import AuthSession, SignUpRequest, SignUpResult, UserRole


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def sign_up(self, request: SignUpRequest) -> SignUpResult:
        """
        Register a new account and assign its marketplace role.

        Raises:
            WeakPasswordError: If the password is too short (no remote call made)
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: If Supabase rejects the credentials
        """
        ...

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        ...

    async def get_role(self, user_id: str) -> Optional[UserRole]:
        """
        Get a user's marketplace role.

        Returns:
            The role, or None for an incomplete account
        """
        ...

    async def require_role(self, user_id: str, role: UserRole) -> UserRole:
        """
        Ensure the user holds a given role.

        Raises:
            RoleNotAssignedError: If the user has no role
            InsufficientPermissionsError: If the user holds the other role
        """
        ...
