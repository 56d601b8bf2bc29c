"""Authorization rules for event chats."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.application.use_cases.events import load_event
from app.domain.entities import Event
from app.domain.errors import ForbiddenError
from app.infrastructure.unit_of_work import UnitOfWork


@dataclass
class ChatAccess:
    """Outcome of the gate: the event and the earliest message the reader sees."""

    event: Event
    visible_since: datetime | None


def check_chat_access(uow: UnitOfWork, *, event_id: int, user_id: int) -> ChatAccess:
    """Allow the creator and approved participants of ``private_application`` events.

    The creator reads the whole history. Approved participants only read
    messages sent at or after the moment they applied.
    """

    event = load_event(uow, event_id)
    if not event.requires_application():
        raise ForbiddenError(
            "Chat só está disponível para eventos do tipo 'Experienciar'"
        )
    if event.creator_id == user_id:
        return ChatAccess(event=event, visible_since=None)

    participation = uow.participations.get_for_user(event_id=event_id, user_id=user_id)
    if participation is None or not participation.is_approved():
        raise ForbiddenError("Acesso ao chat negado")
    return ChatAccess(event=event, visible_since=participation.created_at)
