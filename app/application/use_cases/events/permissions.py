"""Access rules shared by event, participation and chat use cases."""

from __future__ import annotations

from app.domain.entities import Event
from app.domain.errors import ForbiddenError, NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork


def load_event(uow: UnitOfWork, event_id: int) -> Event:
    event = uow.events.get(event_id)
    if event is None:
        raise NotFoundError("Evento não encontrado")
    return event


def is_event_manager(uow: UnitOfWork, event: Event, user_id: int) -> bool:
    """Return ``True`` for the creator or an accepted co-organizer of ``event``."""

    if event.creator_id == user_id:
        return True
    return uow.co_organizers.is_co_organizer(event_id=event.id, user_id=user_id)


def ensure_event_manager(uow: UnitOfWork, event: Event, user_id: int) -> None:
    if not is_event_manager(uow, event, user_id):
        raise ForbiddenError("Apenas os organizadores do evento podem realizar esta ação")


def ensure_event_creator(event: Event, user_id: int) -> None:
    if event.creator_id != user_id:
        raise ForbiddenError("Apenas o criador do evento pode realizar esta ação")


__all__ = [
    "ensure_event_creator",
    "ensure_event_manager",
    "is_event_manager",
    "load_event",
]
