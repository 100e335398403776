"""
Chat repository for the chat_messages table.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import ChatMessage

TABLE = "chat_messages"


class ChatRepository(BaseRepository[ChatMessage]):
    """Append-only message store. Ordering is always created_at ascending."""

    def list_for_request(self, request_id: str) -> list[ChatMessage]:
        result = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("request_id", request_id)
            .order("created_at"),
            "list_messages",
        )
        return [self._map_to_message(row) for row in result.data]

    def list_since(self, request_id: str, since: datetime) -> list[ChatMessage]:
        """Messages committed at or after ``since``, oldest first."""
        result = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("request_id", request_id)
            .gte("created_at", since.isoformat())
            .order("created_at"),
            "list_messages_since",
        )
        return [self._map_to_message(row) for row in result.data]

    def latest(self, request_id: str) -> Optional[ChatMessage]:
        result = self._execute(
            self._db.table(TABLE)
            .select("*")
            .eq("request_id", request_id)
            .order("created_at", desc=True)
            .limit(1),
            "latest_message",
        )
        if not result.data:
            return None
        return self._map_to_message(result.data[0])

    def insert(self, request_id: str, sender_id: str, message: str) -> ChatMessage:
        result = self._execute(
            self._db.table(TABLE).insert({
                "request_id": request_id,
                "sender_id": sender_id,
                "message": message,
            }),
            "send_message",
        )
        return self._map_to_message(result.data[0])

    def _map_to_message(self, data: dict[str, Any]) -> ChatMessage:
        """Map database row to ChatMessage model."""
        return ChatMessage(
            id=str(data["id"]),
            request_id=str(data["request_id"]),
            sender_id=str(data["sender_id"]),
            message=data["message"],
            created_at=data["created_at"],
        )
