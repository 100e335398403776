"""
Chat API endpoints.

Provides REST endpoints for a request's conversation and an SSE stream of
new messages.
"""

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_chat_service
from shared.models import AuthenticatedUser

from .interfaces import IChatService
from .models import ChatMessage, SendMessageRequest

router = APIRouter()


@router.get("/{request_id}/messages", response_model=list[ChatMessage])
async def list_messages(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> list[ChatMessage]:
    """Get the conversation on a request, oldest first."""
    return await service.list_messages(request_id, user.id)


@router.post("/{request_id}/messages", response_model=ChatMessage, status_code=201)
async def send_message(
    request_id: str,
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> ChatMessage:
    return await service.send_message(request_id, user.id, request.message)


async def event_generator(
    request_id: str,
    user_id: str,
    service: IChatService,
):
    """
    Generate SSE events for new chat messages.

    Yields events in the format:
        event: message
        data: <ChatMessage json>
    """
    async for message in service.stream_messages(request_id, user_id):
        yield {
            "event": "message",
            "id": message.id,
            "data": message.model_dump_json(),
        }


@router.get("/{request_id}/stream")
async def stream_messages(
    request_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
):
    """
    Stream new messages on a request via SSE.

    Access is checked before the stream opens, so a non-party gets a plain
    403 rather than an empty stream.
    """
    # The generator checks again, but only after the 200 has been sent
    await service.ensure_party(request_id, user.id)
    return EventSourceResponse(
        event_generator(request_id, user.id, service),
        media_type="text/event-stream",
    )
