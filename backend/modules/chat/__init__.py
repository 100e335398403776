"""
Chat module.

Messages between a request's gardener and the space's landowner.

Public API:
- IChatService: Interface for chat operations
- ChatMessage, SendMessageRequest
"""

from .interfaces import IChatService
from .models import ChatMessage, SendMessageRequest
from .exceptions import EmptyMessageError

__all__ = [
    "IChatService",
    "ChatMessage",
    "SendMessageRequest",
    "EmptyMessageError",
]
