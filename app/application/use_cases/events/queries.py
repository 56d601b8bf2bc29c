"""Read-only use cases for events."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import Event, EventCategory, EventParticipant, User
from app.domain.errors import NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork


@dataclass
class ParticipantEntry:
    """A participation together with the user it belongs to."""

    participation: EventParticipant
    user: User | None


@dataclass
class EventDetails:
    event: Event
    category: EventCategory | None
    creator: User | None
    participants: list[ParticipantEntry]


def list_events(session: Session, *, category_slug: str | None = None) -> Sequence[Event]:
    """Return active events, filtered by category when the slug is known."""

    uow = UnitOfWork(session)
    category_id = None
    if category_slug:
        category = uow.categories.get_by_slug(category_slug)
        if category is not None:
            category_id = category.id
    return uow.events.list(category_id=category_id)


def search_events(session: Session, *, query: str | None) -> Sequence[Event]:
    term = (query or "").strip()
    if not term:
        return []
    return UnitOfWork(session).events.search(term)


def list_participants(session: Session, *, event_id: int) -> list[ParticipantEntry]:
    uow = UnitOfWork(session)
    if uow.events.get(event_id) is None:
        raise NotFoundError("Evento não encontrado")
    return _participant_entries(uow, event_id)


def get_event(session: Session, *, event_id: int) -> EventDetails:
    uow = UnitOfWork(session)
    event = uow.events.get(event_id)
    if event is None:
        raise NotFoundError("Evento não encontrado")
    return _event_details(uow, event)


def list_created_events(session: Session, *, user_id: int) -> list[EventDetails]:
    """Return the events created by ``user_id`` with their participant lists."""

    uow = UnitOfWork(session)
    return [_event_details(uow, event) for event in uow.events.list_by_creator(user_id)]


def list_participating_events(session: Session, *, user_id: int) -> Sequence[Event]:
    return UnitOfWork(session).events.list_by_participant(user_id)


def _event_details(uow: UnitOfWork, event: Event) -> EventDetails:
    return EventDetails(
        event=event,
        category=uow.categories.get(event.category_id),
        creator=uow.users.get(event.creator_id),
        participants=_participant_entries(uow, event.id),
    )


def _participant_entries(uow: UnitOfWork, event_id: int) -> list[ParticipantEntry]:
    participations = uow.participations.list_for_event(event_id)
    users = uow.users.get_map_by_ids([item.user_id for item in participations])
    return [
        ParticipantEntry(participation=item, user=users.get(item.user_id))
        for item in participations
    ]
