"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

When we're ready to extract a module to a microservice, we only need
to change the implementation here to an HTTP client.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from shared.storage import BlobStore
    from modules.auth.interfaces import IAuthService
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository
    from modules.spaces.interfaces import ISpaceService
    from modules.spaces.repository import SpaceRepository
    from modules.space_requests.interfaces import ISpaceRequestService
    from modules.space_requests.repository import SpaceRequestRepository
    from modules.access.interfaces import IAccessService
    from modules.chat.interfaces import IChatService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._blob_store: "BlobStore | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._profile_service: "IProfileService | None" = None
        self._space_repository: "SpaceRepository | None" = None
        self._space_service: "ISpaceService | None" = None
        self._space_request_repository: "SpaceRequestRepository | None" = None
        self._space_request_service: "ISpaceRequestService | None" = None
        self._access_service: "IAccessService | None" = None
        self._chat_service: "IChatService | None" = None

    @property
    def db(self) -> "Client":
        """Get the service-role Supabase client."""
        from shared.database import get_supabase_client
        return get_supabase_client()

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def blob_store(self) -> "BlobStore":
        """Get the blob store instance."""
        if self._blob_store is None:
            from shared.storage import BlobStore
            self._blob_store = BlobStore(self.db)
        return self._blob_store

    @property
    def profile_repository(self) -> "ProfileRepository":
        """Get the profile repository instance."""
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self.db)
        return self._profile_repository

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                repository=self.profile_repository,
                blobs=self.blob_store,
            )
        return self._profile_service

    @property
    def space_repository(self) -> "SpaceRepository":
        """Get the space repository instance."""
        if self._space_repository is None:
            from modules.spaces.repository import SpaceRepository
            self._space_repository = SpaceRepository(self.db)
        return self._space_repository

    @property
    def spaces(self) -> "ISpaceService":
        """Get the space service instance."""
        if self._space_service is None:
            from modules.spaces.service import SpaceService
            self._space_service = SpaceService(
                repository=self.space_repository,
                profiles=self.profile_repository,
                requests=self.space_request_repository,
                blobs=self.blob_store,
                auth=self.auth,
            )
        return self._space_service

    @property
    def space_request_repository(self) -> "SpaceRequestRepository":
        """Get the space request repository instance."""
        if self._space_request_repository is None:
            from modules.space_requests.repository import SpaceRequestRepository
            self._space_request_repository = SpaceRequestRepository(self.db)
        return self._space_request_repository

    @property
    def space_requests(self) -> "ISpaceRequestService":
        """Get the space request (lifecycle) service instance."""
        if self._space_request_service is None:
            from modules.space_requests.service import SpaceRequestService
            self._space_request_service = SpaceRequestService(
                repository=self.space_request_repository,
                spaces=self.space_repository,
                profiles=self.profile_repository,
                auth=self.auth,
            )
        return self._space_request_service

    @property
    def access(self) -> "IAccessService":
        """Get the access token verifier instance."""
        if self._access_service is None:
            from modules.access.service import AccessService
            self._access_service = AccessService(
                requests=self.space_request_repository,
                profiles=self.profile_repository,
            )
        return self._access_service

    @property
    def chat(self) -> "IChatService":
        """Get the chat service instance."""
        if self._chat_service is None:
            from modules.chat.repository import ChatRepository
            from modules.chat.service import ChatService
            self._chat_service = ChatService(
                repository=ChatRepository(self.db),
                requests=self.space_request_repository,
                profiles=self.profile_repository,
            )
        return self._chat_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_space_service() -> "ISpaceService":
    """FastAPI dependency for space service."""
    return get_container().spaces


def get_space_request_service() -> "ISpaceRequestService":
    """FastAPI dependency for space request service."""
    return get_container().space_requests


def get_access_service() -> "IAccessService":
    """FastAPI dependency for access token verifier."""
    return get_container().access


def get_chat_service() -> "IChatService":
    """FastAPI dependency for chat service."""
    return get_container().chat
