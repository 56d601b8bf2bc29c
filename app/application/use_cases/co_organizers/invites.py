"""Use cases for inviting users to co-organize an event."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.events import ensure_event_creator, load_event
from app.application.use_cases.notifications import notify_co_organizer_invite
from app.domain.entities import (
    INVITE_STATUS_PENDING,
    Event,
    EventCoOrganizerInvite,
    User,
)
from app.domain.errors import ConflictError, NotFoundError, ValidationError
from app.infrastructure.email import send_co_organizer_invite_email
from app.infrastructure.security import generate_invite_token
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    normalized = (email or "").strip().lower()
    if "@" not in normalized:
        raise ValidationError("E-mail inválido")
    return normalized


def _load_inviter(uow: UnitOfWork, user_id: int) -> User:
    inviter = uow.users.get(user_id)
    if inviter is None:
        raise NotFoundError("Usuário não encontrado")
    return inviter


def _load_event_invite(
    uow: UnitOfWork, event_id: int, invite_id: int
) -> EventCoOrganizerInvite:
    invite = uow.co_organizers.get_invite(invite_id)
    if invite is None or invite.event_id != event_id:
        raise NotFoundError("Convite não encontrado")
    return invite


def _deliver_invite_email(
    invite: EventCoOrganizerInvite, *, inviter: User, event: Event
) -> None:
    sent = send_co_organizer_invite_email(
        invite.email,
        inviter_name=inviter.full_name,
        event_name=event.name,
        token=invite.token,
        message=invite.message,
    )
    if not sent:
        logger.warning("Could not email co-organizer invite %s", invite.id)


def invite_co_organizer(
    session: Session,
    *,
    event_id: int,
    actor_id: int,
    email: str,
    message: str | None = None,
) -> EventCoOrganizerInvite:
    """Invite ``email`` to co-organize the event. Creator only."""

    email = _normalize_email(email)

    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        ensure_event_creator(event, actor_id)
        inviter = _load_inviter(uow, actor_id)

        if email == inviter.email.lower():
            raise ConflictError("Você já é o organizador deste evento")
        invitee = uow.users.get_by_email(email)
        if invitee is not None and uow.co_organizers.is_co_organizer(
            event_id=event_id, user_id=invitee.id
        ):
            raise ConflictError("Este usuário já é coorganizador do evento")
        if uow.co_organizers.get_pending_invite_by_email(event_id=event_id, email=email):
            raise ConflictError("Já existe um convite pendente para este e-mail")

        invite = uow.co_organizers.create_invite(
            EventCoOrganizerInvite(
                id=None,
                event_id=event_id,
                inviter_id=actor_id,
                email=email,
                token=generate_invite_token(),
                status=INVITE_STATUS_PENDING,
                message=(message or "").strip() or None,
                invitee_id=invitee.id if invitee else None,
                invited_at=now_in_app_timezone(),
                responded_at=None,
            )
        )
        notify_co_organizer_invite(uow, event=event, invite=invite, inviter=inviter)
        uow.after_commit(
            lambda: _deliver_invite_email(invite, inviter=inviter, event=event)
        )
        uow.commit()

    logger.info("User %s invited %s to co-organize event %s", actor_id, email, event_id)
    return invite


def list_invites(
    session: Session, *, event_id: int, actor_id: int
) -> Sequence[EventCoOrganizerInvite]:
    uow = UnitOfWork(session)
    event = load_event(uow, event_id)
    ensure_event_creator(event, actor_id)
    return uow.co_organizers.list_invites(event_id)


def cancel_invite(session: Session, *, event_id: int, invite_id: int, actor_id: int) -> None:
    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        ensure_event_creator(event, actor_id)
        invite = _load_event_invite(uow, event_id, invite_id)
        if not invite.is_pending():
            raise ConflictError("Apenas convites pendentes podem ser cancelados")
        uow.co_organizers.delete_invite(invite_id)
        uow.commit()


def resend_invite(
    session: Session, *, event_id: int, invite_id: int, actor_id: int
) -> EventCoOrganizerInvite:
    """Send the invitation email again and refresh its timestamp."""

    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        ensure_event_creator(event, actor_id)
        inviter = _load_inviter(uow, actor_id)
        current = _load_event_invite(uow, event_id, invite_id)
        if not current.is_pending():
            raise ConflictError("Apenas convites pendentes podem ser reenviados")

        invite = uow.co_organizers.update_invite(
            replace(current, invited_at=now_in_app_timezone())
        )
        uow.after_commit(
            lambda: _deliver_invite_email(invite, inviter=inviter, event=event)
        )
        uow.commit()
    return invite
