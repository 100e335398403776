"""
Authentication service implementation.

Validates Supabase JWT tokens, runs the sign-up/sign-in flows against
Supabase Auth, and resolves marketplace roles from the user_roles table.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import jwt
from supabase import AuthError

from shared.config import get_settings
from shared.database import get_supabase_client, get_supabase_anon_client
from shared.exceptions import ExternalServiceError
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    AuthSession,
    JWTPayload,
    MIN_PASSWORD_LENGTH,
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
from .repository import RoleRepository

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication, Supabase Auth for
    account flows, and the user_roles table for marketplace roles.
    """

    def __init__(self, roles: Optional[RoleRepository] = None):
        self._settings = get_settings()
        self._db = get_supabase_client()
        self._roles = roles or RoleRepository(self._db)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        jwt_payload = JWTPayload(**payload)

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email or "",
            email_verified=jwt_payload.email_confirmed_at is not None,
            name=jwt_payload.user_metadata.get("name"),
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
        )

    async def sign_up(self, request: SignUpRequest) -> SignUpResult:
        """
        Create the auth user, then insert its role row.

        Profile rows are created by the on-signup database trigger from
        the ``name`` metadata.
        """
        if len(request.password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError(MIN_PASSWORD_LENGTH)

        client = get_supabase_anon_client()
        try:
            response = client.auth.sign_up({
                "email": request.email,
                "password": request.password,
                "options": {
                    "email_redirect_to": f"{self._settings.frontend_url}/",
                    "data": {"name": request.name},
                },
            })
        except AuthError as e:
            if "already registered" in (e.message or "").lower():
                raise EmailAlreadyRegisteredError(request.email)
            raise ExternalServiceError(
                e.message or "Sign up failed",
                service="supabase_auth",
            ) from e

        if response.user is None:
            raise ExternalServiceError(
                "User creation failed - no user returned",
                service="supabase_auth",
            )

        user_id = str(response.user.id)
        logger.info("Created user %s, assigning role %s", user_id, request.role.value)
        self._roles.insert_role(user_id, request.role)

        session = None
        if response.session is not None:
            session = AuthSession(
                user_id=user_id,
                email=request.email,
                access_token=response.session.access_token,
                refresh_token=response.session.refresh_token,
                expires_at=response.session.expires_at,
                role=request.role,
            )

        return SignUpResult(
            user_id=user_id,
            email=request.email,
            role=request.role,
            email_confirmation_required=response.session is None,
            session=session,
        )

    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in and resolve the account's role."""
        client = get_supabase_anon_client()
        try:
            response = client.auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except AuthError as e:
            logger.info("Sign in rejected for %s: %s", email, e.message)
            raise InvalidCredentialsError(e.message or "Invalid login credentials")

        if response.user is None or response.session is None:
            raise InvalidCredentialsError("Sign in failed - no user returned")

        user_id = str(response.user.id)
        role = self._roles.get_role(user_id)

        return AuthSession(
            user_id=user_id,
            email=response.user.email or email,
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
            expires_at=response.session.expires_at,
            role=role,
        )

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session via the admin API."""
        if not access_token:
            raise MissingTokenError()
        try:
            self._db.auth.admin.sign_out(access_token)
        except AuthError as e:
            raise ExternalServiceError(
                e.message or "Sign out failed",
                service="supabase_auth",
            ) from e

    async def get_role(self, user_id: str) -> Optional[UserRole]:
        return self._roles.get_role(user_id)

    async def require_role(self, user_id: str, role: UserRole) -> UserRole:
        actual = self._roles.get_role(user_id)
        if actual is None:
            raise RoleNotAssignedError(user_id)
        if actual != role:
            raise InsufficientPermissionsError(role.value, actual.value)
        return actual
