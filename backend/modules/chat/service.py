"""
Chat service implementation.

Live delivery polls the chat_messages table. The stream cursor is the
created_at of the newest message already delivered; rows sharing that
timestamp are remembered by id so none is yielded twice.
"""

import asyncio
import logging
from datetime import datetime
from typing import AsyncIterator, Optional

from shared.config import get_settings
from modules.profiles.repository import ProfileRepository
from modules.space_requests.exceptions import RequestAccessDeniedError, SpaceRequestNotFoundError
from modules.space_requests.lifecycle import parties_of
from modules.space_requests.repository import SpaceRequestRepository

from .interfaces import IChatService
from .models import ChatMessage
from .exceptions import EmptyMessageError
from .repository import ChatRepository

logger = logging.getLogger(__name__)


class ChatService(IChatService):
    """Per-request chat restricted to the request's two parties."""

    def __init__(
        self,
        repository: ChatRepository,
        requests: SpaceRequestRepository,
        profiles: ProfileRepository,
        poll_interval: Optional[float] = None,
    ):
        self._repo = repository
        self._requests = requests
        self._profiles = profiles
        self._poll_interval = (
            poll_interval if poll_interval is not None else get_settings().chat_poll_interval
        )

    async def list_messages(self, request_id: str, caller_id: str) -> list[ChatMessage]:
        await self.ensure_party(request_id, caller_id)
        return self._with_names(self._repo.list_for_request(request_id))

    async def send_message(self, request_id: str, caller_id: str, text: str) -> ChatMessage:
        text = (text or "").strip()
        if not text:
            raise EmptyMessageError()

        await self.ensure_party(request_id, caller_id)
        message = self._repo.insert(request_id, caller_id, text)
        logger.debug("Message %s posted on request %s", message.id, request_id)
        return self._with_names([message])[0]

    async def ensure_party(self, request_id: str, caller_id: str) -> None:
        request = self._requests.get_by_id(request_id)
        if request is None:
            raise SpaceRequestNotFoundError(request_id)
        owner_id = request.space.owner_id if request.space else None
        if not parties_of(caller_id, request.gardener_id, owner_id):
            raise RequestAccessDeniedError(request_id, caller_id)

    async def stream_messages(self, request_id: str, caller_id: str) -> AsyncIterator[ChatMessage]:
        # Callers outside the SSE route get no prior check, so the generator
        # guards itself. The route repeats it to fail before the response starts.
        await self.ensure_party(request_id, caller_id)

        cursor: Optional[datetime] = None
        seen: set[str] = set()
        latest = self._repo.latest(request_id)
        if latest is not None:
            cursor, seen = latest.created_at, {latest.id}

        logger.debug("Chat stream opened on request %s by %s", request_id, caller_id)
        while True:
            await asyncio.sleep(self._poll_interval)

            if cursor is None:
                batch = self._repo.list_for_request(request_id)
            else:
                batch = self._repo.list_since(request_id, cursor)
            fresh = [m for m in batch if m.id not in seen]
            if not fresh:
                continue

            for message in self._with_names(fresh):
                yield message

            cursor = max(m.created_at for m in batch)
            seen = {m.id for m in batch if m.created_at == cursor}

    def _with_names(self, messages: list[ChatMessage]) -> list[ChatMessage]:
        names = self._profiles.get_names(m.sender_id for m in messages)
        return [m.model_copy(update={"sender_name": names.get(m.sender_id)}) for m in messages]
