"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any


class ErrorResponse(BaseModel):
    """Body of every FarmShareError response."""

    error: str
    message: str
    details: dict[str, Any] = {}
