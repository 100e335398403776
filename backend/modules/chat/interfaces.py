"""
Chat module interface.
"""

from typing import AsyncIterator, Protocol, runtime_checkable

from .models import ChatMessage


@runtime_checkable
class IChatService(Protocol):
    """
    Interface for per-request chat between the gardener and the landowner.

    Only the two parties of a request may read or post.
    """

    async def list_messages(self, request_id: str, caller_id: str) -> list[ChatMessage]:
        """
        Get the full conversation, oldest first, with sender names.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is neither party
        """
        ...

    async def send_message(self, request_id: str, caller_id: str, text: str) -> ChatMessage:
        """
        Post a message.

        Raises:
            EmptyMessageError: If the text is blank
            SpaceRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is neither party
        """
        ...

    async def ensure_party(self, request_id: str, caller_id: str) -> None:
        """
        Check chat access without reading messages.

        Raises:
            SpaceRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is neither party
        """
        ...

    def stream_messages(self, request_id: str, caller_id: str) -> AsyncIterator[ChatMessage]:
        """
        Yield messages posted after the stream opens, in commit order.

        A message is yielded at most once per stream. Runs until the consumer
        stops iterating.
        """
        ...
