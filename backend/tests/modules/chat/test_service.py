"""Tests for the chat service."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from modules.chat.models import ChatMessage
from modules.chat.service import ChatService
from modules.chat.exceptions import EmptyMessageError
from modules.space_requests.exceptions import RequestAccessDeniedError, SpaceRequestNotFoundError

from tests.conftest import GARDENER_ID, LANDOWNER_ID, STRANGER_ID
from tests.fakes import FakeProfileRepository, FakeSpaceRepository, FakeSpaceRequestRepository, make_space

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeChatRepository:
    """Message table; insert order may differ from created_at order."""

    def __init__(self):
        self.messages: list[ChatMessage] = []
        self.inserted: list[ChatMessage] = []
        self.polls = 0
        # Batches of (id, sender, text, seconds) that appear on successive polls
        self.arrivals: list[list[tuple[str, str, str, int]]] = []

    def add(self, message_id: str, sender_id: str, text: str, seconds: int) -> ChatMessage:
        message = ChatMessage(
            id=message_id,
            request_id="request-1",
            sender_id=sender_id,
            message=text,
            created_at=T0 + timedelta(seconds=seconds),
        )
        self.messages.append(message)
        return message

    def _ordered(self) -> list[ChatMessage]:
        return sorted(self.messages, key=lambda m: m.created_at)

    def _poll(self) -> None:
        self.polls += 1
        if self.arrivals:
            for args in self.arrivals.pop(0):
                self.add(*args)

    def list_for_request(self, request_id: str) -> list[ChatMessage]:
        self._poll()
        return self._ordered()

    def list_since(self, request_id: str, since: datetime) -> list[ChatMessage]:
        self._poll()
        return [m for m in self._ordered() if m.created_at >= since]

    def latest(self, request_id: str) -> Optional[ChatMessage]:
        ordered = self._ordered()
        return ordered[-1] if ordered else None

    def insert(self, request_id: str, sender_id: str, message: str) -> ChatMessage:
        created = self.add(f"m-{len(self.messages) + 1}", sender_id, message, 1000 + len(self.messages))
        self.inserted.append(created)
        return created


@pytest.fixture
def chat_repo():
    return FakeChatRepository()


@pytest.fixture
def service(chat_repo):
    spaces = FakeSpaceRepository([make_space("space-1", LANDOWNER_ID)])
    requests = FakeSpaceRequestRepository(spaces)
    requests.create({"space_id": "space-1", "gardener_id": GARDENER_ID, "status": "pending"})
    return ChatService(
        repository=chat_repo,
        requests=requests,
        profiles=FakeProfileRepository({GARDENER_ID: "Greta", LANDOWNER_ID: "Lars"}),
        poll_interval=0,
    )


class TestListMessages:
    @pytest.mark.asyncio
    async def test_messages_come_back_in_created_at_order(self, service, chat_repo):
        chat_repo.add("m-2", LANDOWNER_ID, "second", 20)
        chat_repo.add("m-1", GARDENER_ID, "first", 10)
        chat_repo.add("m-3", GARDENER_ID, "third", 30)

        messages = await service.list_messages("request-1", LANDOWNER_ID)

        assert [m.id for m in messages] == ["m-1", "m-2", "m-3"]
        assert [m.sender_name for m in messages] == ["Greta", "Lars", "Greta"]

    @pytest.mark.asyncio
    async def test_outsider_cannot_read(self, service):
        with pytest.raises(RequestAccessDeniedError):
            await service.list_messages("request-1", STRANGER_ID)

    @pytest.mark.asyncio
    async def test_unknown_request(self, service):
        with pytest.raises(SpaceRequestNotFoundError):
            await service.list_messages("missing", GARDENER_ID)


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_send_trims_text(self, service, chat_repo):
        message = await service.send_message("request-1", GARDENER_ID, "  hello  ")

        assert message.message == "hello"
        assert message.sender_name == "Greta"
        assert chat_repo.inserted[0].sender_id == GARDENER_ID

    @pytest.mark.asyncio
    async def test_blank_message_rejected_before_write(self, service, chat_repo):
        with pytest.raises(EmptyMessageError):
            await service.send_message("request-1", GARDENER_ID, "   ")
        assert chat_repo.inserted == []

    @pytest.mark.asyncio
    async def test_outsider_cannot_send(self, service, chat_repo):
        with pytest.raises(RequestAccessDeniedError):
            await service.send_message("request-1", STRANGER_ID, "hi")
        assert chat_repo.inserted == []


class TestStreamMessages:
    @pytest.mark.asyncio
    async def test_stream_yields_only_new_messages_in_order(self, service, chat_repo):
        chat_repo.add("old", GARDENER_ID, "before the stream", 0)
        chat_repo.arrivals = [
            [],
            [("b", LANDOWNER_ID, "b", 20), ("a", GARDENER_ID, "a", 10)],
        ]
        stream = service.stream_messages("request-1", LANDOWNER_ID)

        received = [await stream.__anext__(), await stream.__anext__()]
        await stream.aclose()

        assert [m.id for m in received] == ["a", "b"]
        assert chat_repo.polls == 2

    @pytest.mark.asyncio
    async def test_same_timestamp_messages_are_not_repeated(self, service, chat_repo):
        chat_repo.add("x", GARDENER_ID, "x", 5)
        chat_repo.arrivals = [
            [("y", LANDOWNER_ID, "y", 5)],
            [],
            [("z", LANDOWNER_ID, "z", 6)],
        ]
        stream = service.stream_messages("request-1", GARDENER_ID)

        received = [await stream.__anext__(), await stream.__anext__()]
        await stream.aclose()

        assert [m.id for m in received] == ["y", "z"]

    @pytest.mark.asyncio
    async def test_stream_on_empty_chat(self, service, chat_repo):
        chat_repo.arrivals = [[("first", LANDOWNER_ID, "hello", 1)]]
        stream = service.stream_messages("request-1", GARDENER_ID)

        message = await stream.__anext__()
        await stream.aclose()

        assert message.id == "first"
        assert message.sender_name == "Lars"

    @pytest.mark.asyncio
    async def test_outsider_cannot_stream(self, service):
        stream = service.stream_messages("request-1", STRANGER_ID)
        with pytest.raises(RequestAccessDeniedError):
            await stream.__anext__()
