"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating collaborator failures into
ExternalServiceError so that callers only ever see FarmShareError subclasses.
"""

import logging
from typing import TypeVar, Generic, Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ExternalServiceError


T = TypeVar("T")

logger = logging.getLogger(__name__)

GENERIC_REMOTE_FAILURE = "The data service could not complete the request"

# Postgres "invalid_text_representation", e.g. a non-UUID value for a uuid column
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() for running a query builder with uniform error translation
    - _find_rows() for keyed reads, where a malformed key matches nothing

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class SpaceRepository(BaseRepository[Space]):
            def get_by_id(self, space_id: str) -> Optional[Space]:
                result = self._execute(
                    self._db.table("urban_farm_spaces").select("*").eq("id", space_id),
                    "get_space",
                )
                if not result.data:
                    return None
                return self._map_to_space(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: A Supabase query builder (anything with ``execute()``).
            operation: Short name of the operation, used in logs and error details.

        Returns:
            The API response with ``data`` (and ``count`` when requested).

        Raises:
            ExternalServiceError: If the data service rejects the call or is unreachable.
        """
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            raise self._remote_failure(e, operation) from e

    def _find_rows(self, query: Any, operation: str) -> list[dict[str, Any]]:
        """
        Execute a keyed read and return its rows.

        A key the column type cannot represent (such as ``"abc"`` for a
        UUID id) matches nothing, so callers report it as not found.

        Raises:
            ExternalServiceError: For any other data service failure.
        """
        try:
            return query.execute().data
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                logger.debug("Supabase %s: malformed key: %s", operation, e.message)
                return []
            raise self._remote_failure(e, operation) from e
        except httpx.HTTPError as e:
            raise self._remote_failure(e, operation) from e

    def _remote_failure(self, error: Exception, operation: str) -> ExternalServiceError:
        if isinstance(error, APIError):
            logger.warning("Supabase %s failed: %s", operation, error.message)
            return ExternalServiceError(
                error.message or GENERIC_REMOTE_FAILURE,
                service="supabase",
                details={"operation": operation, "remote_code": error.code},
            )
        logger.warning("Supabase %s unreachable: %s", operation, error)
        return ExternalServiceError(
            str(error) or GENERIC_REMOTE_FAILURE,
            service="supabase",
            details={"operation": operation},
        )
