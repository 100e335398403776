"""
Session-scoped identity context.

AuthContext holds the identity/session/role triple of one Supabase client
and keeps it current from the client's session-change notifications.
It is created and passed explicitly to whatever needs identity; there is
no module-level instance.

Usage:
    context = AuthContext(client, RoleRepository(get_supabase_client()))
    context.initialize()
    unsubscribe = context.on_change(lambda event, state: ...)
    ...
    context.teardown()
"""

import logging
from typing import Any, Callable, Optional

from supabase import Client

from shared.models import AuthenticatedUser
from .models import AuthState
from .repository import RoleRepository

logger = logging.getLogger(__name__)

AuthListener = Callable[[str, AuthState], None]


class AuthContext:
    """Identity, session and role of a Supabase client, with explicit lifecycle."""

    def __init__(self, client: Client, roles: RoleRepository) -> None:
        self._client = client
        self._roles = roles
        self._state = AuthState()
        self._listeners: list[AuthListener] = []
        self._subscription: Any = None
        self._initialized = False

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> AuthState:
        """Load the current session and subscribe to session changes."""
        if self._initialized:
            return self._state

        self._state = self._resolve(self._client.auth.get_session())
        self._subscription = self._client.auth.on_auth_state_change(self._handle_change)
        self._initialized = True
        return self._state

    def on_change(self, listener: AuthListener) -> Callable[[], None]:
        """
        Register a listener called with (event, state) on every session change.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh_role(self) -> AuthState:
        """Re-read the role row, e.g. right after sign-up inserted it."""
        self._state = self._with_role(self._state.user, self._state.access_token)
        return self._state

    def teardown(self) -> None:
        """Drop the session subscription and all listeners."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._listeners.clear()
        self._state = AuthState()
        self._initialized = False

    def _handle_change(self, event: Any, session: Any) -> None:
        event_name = getattr(event, "value", event)
        logger.debug("Auth state changed: %s", event_name)
        self._state = self._resolve(session)
        for listener in list(self._listeners):
            listener(str(event_name), self._state)

    def _resolve(self, session: Any) -> AuthState:
        if session is None or session.user is None:
            return AuthState()
        user = AuthenticatedUser(
            id=str(session.user.id),
            email=session.user.email or "",
            email_verified=session.user.email_confirmed_at is not None,
            name=(session.user.user_metadata or {}).get("name"),
        )
        return self._with_role(user, session.access_token)

    def _with_role(
        self,
        user: Optional[AuthenticatedUser],
        access_token: Optional[str],
    ) -> AuthState:
        if user is None:
            return AuthState()
        return AuthState(
            user=user,
            access_token=access_token,
            role=self._roles.get_role(user.id),
        )
