"""Use case for building the data shown when an event is shared."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.errors import NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork

DEFAULT_SHARE_DESCRIPTION = "Participe deste evento no Baco Experiências!"
DEFAULT_LOCATION = "Local a definir"


@dataclass
class SharedEventSummary:
    id: int
    name: str
    date: str
    time: str
    location: str
    category: str
    creator: str


@dataclass
class EventShare:
    """Link and preview text for sharing an event outside the app."""

    link: str
    title: str
    description: str
    image: str | None
    event: SharedEventSummary


def share_event(session: Session, *, event_id: int) -> EventShare:
    uow = UnitOfWork(session)
    event = uow.events.get(event_id)
    if event is None:
        raise NotFoundError("Evento não encontrado")
    creator = uow.users.get(event.creator_id)
    category = uow.categories.get(event.category_id)
    if creator is None or category is None:
        raise NotFoundError("Dados do evento incompletos")

    time = event.time_start
    if event.time_end:
        time = f"{time} - {event.time_end}"

    base_url = get_settings().public_base_url.rstrip("/")
    return EventShare(
        link=f"{base_url}/eventos/{event.id}",
        title=f"{event.name} - Baco Experiências",
        description=event.description or DEFAULT_SHARE_DESCRIPTION,
        image=event.cover_image,
        event=SharedEventSummary(
            id=event.id,
            name=event.name,
            date=event.date.strftime("%d/%m/%Y"),
            time=time,
            location=event.location or DEFAULT_LOCATION,
            category=category.name,
            creator=creator.full_name,
        ),
    )


__all__ = ["EventShare", "SharedEventSummary", "share_event"]
