"""Use cases for leaving an event or removing a participant."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.events import is_event_manager, load_event
from app.domain.entities import EventParticipant
from app.domain.errors import ForbiddenError, NotFoundError
from app.infrastructure.repositories import ParticipationRepository
from app.infrastructure.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def get_participation(
    session: Session, *, event_id: int, user_id: int
) -> EventParticipant | None:
    """Return the caller's participation in the event, if any."""

    return ParticipationRepository(session).get_for_user(event_id=event_id, user_id=user_id)


def remove_participation(
    session: Session, *, participation_id: int, actor_id: int
) -> None:
    """Delete a participation. Allowed for the participant and event managers."""

    with UnitOfWork(session) as uow:
        participation = uow.participations.get(participation_id)
        if participation is None:
            raise NotFoundError("Participação não encontrada")
        if participation.user_id != actor_id:
            event = load_event(uow, participation.event_id)
            if not is_event_manager(uow, event, actor_id):
                raise ForbiddenError("Você não pode remover esta participação")
        uow.participations.delete(participation_id)
        uow.commit()

    logger.info("Participation %s removed by %s", participation_id, actor_id)


def cancel_participation(session: Session, *, event_id: int, user_id: int) -> None:
    """Withdraw the caller from the event."""

    with UnitOfWork(session) as uow:
        load_event(uow, event_id)
        participation = uow.participations.get_for_user(event_id=event_id, user_id=user_id)
        if participation is None:
            raise NotFoundError("Você não está participando deste evento")
        uow.participations.delete(participation.id)
        uow.commit()

    logger.info("User %s left event %s", user_id, event_id)
