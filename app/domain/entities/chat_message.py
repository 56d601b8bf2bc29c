"""Domain entity representing a chat message posted in an event."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ChatMessage:
    """Immutable message appended to an event chat."""

    id: int | None
    event_id: int
    sender_id: int
    content: str
    sent_at: datetime | None


__all__ = ["ChatMessage"]
