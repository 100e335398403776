"""
Chat module exceptions.
"""

from shared.exceptions import ValidationError


class EmptyMessageError(ValidationError):
    """Raised when a message is blank after trimming."""

    def __init__(self):
        super().__init__("Message cannot be empty", code="EMPTY_MESSAGE")
