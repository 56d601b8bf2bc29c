"""Use cases for approving, rejecting and reverting applications."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.events import ensure_event_manager, load_event
from app.application.use_cases.notifications import (
    notify_participation_approved,
    notify_participation_rejected,
)
from app.config import get_settings
from app.domain.entities import (
    PARTICIPATION_STATUS_APPROVED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    EventParticipant,
)
from app.domain.errors import ConflictError, NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

_REVERTIBLE_STATUSES = (PARTICIPATION_STATUS_APPROVED, PARTICIPATION_STATUS_REJECTED)


def _load_participation(uow: UnitOfWork, participation_id: int) -> EventParticipant:
    participation = uow.participations.get(participation_id)
    if participation is None:
        raise NotFoundError("Participação não encontrada")
    return participation


def _strict() -> bool:
    return get_settings().strict_participation_transitions


def approve_participation(
    session: Session, *, participation_id: int, actor_id: int
) -> EventParticipant:
    """Move a pending participation to ``approved`` and tell the participant."""

    with UnitOfWork(session) as uow:
        current = _load_participation(uow, participation_id)
        event = load_event(uow, current.event_id)
        ensure_event_manager(uow, event, actor_id)
        if _strict() and not current.is_pending():
            raise ConflictError("Apenas solicitações pendentes podem ser aprovadas")

        participation = uow.participations.update(
            replace(
                current,
                status=PARTICIPATION_STATUS_APPROVED,
                reviewed_by=actor_id,
                reviewed_at=now_in_app_timezone(),
            )
        )
        notify_participation_approved(uow, event=event, participation=participation)
        uow.commit()

    logger.info("Participation %s approved by %s", participation_id, actor_id)
    return participation


def reject_participation(
    session: Session, *, participation_id: int, actor_id: int
) -> EventParticipant:
    """Move a pending participation to ``rejected`` and tell the participant."""

    with UnitOfWork(session) as uow:
        current = _load_participation(uow, participation_id)
        event = load_event(uow, current.event_id)
        ensure_event_manager(uow, event, actor_id)
        if _strict() and not current.is_pending():
            raise ConflictError("Apenas solicitações pendentes podem ser recusadas")

        participation = uow.participations.update(
            replace(
                current,
                status=PARTICIPATION_STATUS_REJECTED,
                reviewed_by=actor_id,
                reviewed_at=now_in_app_timezone(),
            )
        )
        notify_participation_rejected(uow, event=event, participation=participation)
        uow.commit()

    logger.info("Participation %s rejected by %s", participation_id, actor_id)
    return participation


def revert_participation(
    session: Session, *, participation_id: int, actor_id: int
) -> EventParticipant:
    """Send a reviewed participation back to ``pending`` without notifying."""

    with UnitOfWork(session) as uow:
        current = _load_participation(uow, participation_id)
        event = load_event(uow, current.event_id)
        ensure_event_manager(uow, event, actor_id)
        if _strict() and current.status not in _REVERTIBLE_STATUSES:
            raise ConflictError("Apenas solicitações aprovadas ou recusadas podem ser revertidas")

        participation = uow.participations.update(
            replace(
                current,
                status=PARTICIPATION_STATUS_PENDING,
                reviewed_by=None,
                reviewed_at=None,
            )
        )
        uow.commit()

    logger.info("Participation %s reverted to pending by %s", participation_id, actor_id)
    return participation
