"""
Authentication module.

Handles JWT validation, sign-up/sign-in, marketplace roles, and the
injected session context.

Public API:
- IAuthService: Interface for auth operations
- AuthContext: Identity/session/role holder with explicit lifecycle
- UserRole: landowner | gardener
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .context import AuthContext
from .models import (
    AuthSession,
    AuthState,
    JWTPayload,
    SignInRequest,
    SignUpRequest,
    SignUpResult,
    UserRole,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    WeakPasswordError,
    EmailAlreadyRegisteredError,
    RoleNotAssignedError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    "AuthContext",
    # Models
    "AuthSession",
    "AuthState",
    "JWTPayload",
    "SignInRequest",
    "SignUpRequest",
    "SignUpResult",
    "UserRole",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "WeakPasswordError",
    "EmailAlreadyRegisteredError",
    "RoleNotAssignedError",
    "InsufficientPermissionsError",
]
