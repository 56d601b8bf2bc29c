"""Use case for joining an event or applying to it."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.events import load_event
from app.application.use_cases.notifications import notify_participant_request
from app.domain.entities import (
    PARTICIPATION_STATUS_CONFIRMED,
    PARTICIPATION_STATUS_PENDING,
    EventParticipant,
)
from app.domain.errors import ConflictError, NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def request_participation(
    session: Session,
    *,
    event_id: int,
    user_id: int,
    application_reason: str | None = None,
) -> EventParticipant:
    """Attach ``user_id`` to the event.

    ``private_application`` events start the participation as ``pending`` and
    notify the creator. Every other type confirms it immediately.
    """

    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        if event.creator_id == user_id:
            raise ConflictError("O criador não pode participar do próprio evento")
        if uow.participations.get_for_user(event_id=event_id, user_id=user_id):
            raise ConflictError("Você já está participando deste evento")
        requester = uow.users.get(user_id)
        if requester is None:
            raise NotFoundError("Usuário não encontrado")

        status = (
            PARTICIPATION_STATUS_PENDING
            if event.requires_application()
            else PARTICIPATION_STATUS_CONFIRMED
        )
        participation = uow.participations.create(
            EventParticipant(
                id=None,
                event_id=event_id,
                user_id=user_id,
                status=status,
                application_reason=(application_reason or "").strip() or None,
                reviewed_by=None,
                reviewed_at=None,
                created_at=now_in_app_timezone(),
            )
        )
        if event.requires_application():
            notify_participant_request(
                uow, event=event, participation=participation, requester=requester
            )
        uow.commit()

    logger.info(
        "User %s joined event %s with status %s", user_id, event_id, participation.status
    )
    return participation
