"""Persistence helpers for event chat messages."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import ChatMessage
from app.infrastructure.models import ChatMessageModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class ChatMessageRepository:
    """Store and read the messages exchanged in an event chat."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_event(
        self, event_id: int, *, since: datetime | None = None
    ) -> Sequence[ChatMessage]:
        query = self.session.query(ChatMessageModel).filter(
            ChatMessageModel.event_id == event_id
        )
        if since is not None:
            query = query.filter(
                ChatMessageModel.sent_at >= ensure_app_naive_datetime(since)
            )
        query = query.order_by(ChatMessageModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def create(self, message: ChatMessage) -> ChatMessage:
        model = ChatMessageModel(
            event_id=message.event_id,
            sender_id=message.sender_id,
            content=message.content,
        )
        if message.sent_at is not None:
            model.sent_at = ensure_app_naive_datetime(message.sent_at)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_for_event(self, event_id: int) -> int:
        deleted = (
            self.session.query(ChatMessageModel)
            .filter(ChatMessageModel.event_id == event_id)
            .delete(synchronize_session=False)
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _to_entity(model: ChatMessageModel) -> ChatMessage:
        return ChatMessage(
            id=model.id,
            event_id=model.event_id,
            sender_id=model.sender_id,
            content=model.content,
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["ChatMessageRepository"]
