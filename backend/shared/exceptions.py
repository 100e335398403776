"""
Base exception classes for the Urban Farm Share backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: the API
layer maps each base class to one HTTP status code.
"""

from typing import Optional, Any


class FarmShareError(Exception):
    """
    Base exception for all Urban Farm Share errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(FarmShareError):
    """Resource not found."""

    pass


class ValidationError(FarmShareError):
    """Input validation failed."""

    pass


class AuthenticationError(FarmShareError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(FarmShareError):
    """Authorization failed (caller lacks authority for the operation)."""

    pass


class ConflictError(FarmShareError):
    """The operation conflicts with the current state of another record."""

    pass


class InvalidTransitionError(FarmShareError):
    """A status change is not adjacent to the current status."""

    pass


class ExternalServiceError(FarmShareError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class FileTooLargeError(ValidationError):
    """Raised before upload when a file exceeds the size limit."""

    def __init__(self, size: int, max_bytes: int):
        super().__init__(
            f"File is too large ({size} bytes). Maximum is {max_bytes} bytes",
            code="FILE_TOO_LARGE",
            details={"size": size, "max_bytes": max_bytes},
        )
