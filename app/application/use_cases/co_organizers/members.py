"""Use cases for listing and removing co-organizers."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.application.use_cases.events import ensure_event_creator, load_event
from app.domain.entities import EventCoOrganizer, User
from app.domain.errors import NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork


@dataclass
class CoOrganizerEntry:
    membership: EventCoOrganizer
    user: User | None


def list_co_organizers(session: Session, *, event_id: int) -> list[CoOrganizerEntry]:
    uow = UnitOfWork(session)
    load_event(uow, event_id)
    memberships = uow.co_organizers.list_co_organizers(event_id)
    users = uow.users.get_map_by_ids([item.user_id for item in memberships])
    return [
        CoOrganizerEntry(membership=item, user=users.get(item.user_id))
        for item in memberships
    ]


def remove_co_organizer(
    session: Session, *, event_id: int, user_id: int, actor_id: int
) -> None:
    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        ensure_event_creator(event, actor_id)
        if not uow.co_organizers.remove_co_organizer(event_id=event_id, user_id=user_id):
            raise NotFoundError("Coorganizador não encontrado")
        uow.commit()
