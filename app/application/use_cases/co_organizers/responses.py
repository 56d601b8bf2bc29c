"""Use cases for answering a co-organizer invitation."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import (
    INVITE_STATUS_ACCEPTED,
    INVITE_STATUS_REJECTED,
    EventCoOrganizerInvite,
    User,
)
from app.domain.errors import ConflictError, ForbiddenError, NotFoundError
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _load_addressed_invite(
    uow: UnitOfWork, token: str, user_id: int
) -> tuple[EventCoOrganizerInvite, User]:
    invite = uow.co_organizers.get_invite_by_token(token)
    if invite is None:
        raise NotFoundError("Convite não encontrado")
    user = uow.users.get(user_id)
    if user is None:
        raise NotFoundError("Usuário não encontrado")
    if invite.email.lower() != user.email.lower():
        raise ForbiddenError("Este convite foi enviado para outro e-mail")
    if not invite.is_pending():
        raise ConflictError("Este convite já foi respondido")
    return invite, user


def accept_invite(session: Session, *, token: str, user_id: int) -> EventCoOrganizerInvite:
    """Grant the invited user management rights on the event."""

    with UnitOfWork(session) as uow:
        current, user = _load_addressed_invite(uow, token, user_id)
        uow.co_organizers.add_co_organizer(event_id=current.event_id, user_id=user.id)
        invite = uow.co_organizers.update_invite(
            replace(
                current,
                status=INVITE_STATUS_ACCEPTED,
                invitee_id=user.id,
                responded_at=now_in_app_timezone(),
            )
        )
        uow.commit()

    logger.info("User %s became co-organizer of event %s", user_id, invite.event_id)
    return invite


def reject_invite(session: Session, *, token: str, user_id: int) -> EventCoOrganizerInvite:
    with UnitOfWork(session) as uow:
        current, user = _load_addressed_invite(uow, token, user_id)
        invite = uow.co_organizers.update_invite(
            replace(
                current,
                status=INVITE_STATUS_REJECTED,
                invitee_id=user.id,
                responded_at=now_in_app_timezone(),
            )
        )
        uow.commit()
    return invite
