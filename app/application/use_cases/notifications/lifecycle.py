"""Notifications emitted by participation, event and invitation changes."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import (
    NOTIFICATION_CO_ORGANIZER_INVITE,
    NOTIFICATION_EVENT_CANCELED,
    NOTIFICATION_PARTICIPANT_REQUEST,
    NOTIFICATION_PARTICIPATION_APPROVED,
    NOTIFICATION_PARTICIPATION_REJECTED,
    SOURCE_TYPE_CO_ORGANIZER_INVITE,
    SOURCE_TYPE_PARTICIPATION,
    Event,
    EventCoOrganizerInvite,
    EventParticipant,
    NotificationDelivery,
    User,
)
from app.infrastructure.unit_of_work import UnitOfWork

from .notify import notify


def notify_participant_request(
    uow: UnitOfWork, *, event: Event, participation: EventParticipant, requester: User
) -> list[NotificationDelivery]:
    return notify(
        uow,
        notification_type=NOTIFICATION_PARTICIPANT_REQUEST,
        title="Nova solicitação para seu evento",
        message=f'{requester.full_name} quer experienciar o seu evento "{event.name}"',
        recipient_ids=[event.creator_id],
        event_id=event.id,
        source_id=participation.id,
        source_type=SOURCE_TYPE_PARTICIPATION,
        deduplicate=True,
    )


def notify_participation_approved(
    uow: UnitOfWork, *, event: Event, participation: EventParticipant
) -> list[NotificationDelivery]:
    return notify(
        uow,
        notification_type=NOTIFICATION_PARTICIPATION_APPROVED,
        title="Solicitação aprovada",
        message=f'Sua solicitação para experienciar o evento "{event.name}" foi aprovada!',
        recipient_ids=[participation.user_id],
        event_id=event.id,
        source_id=participation.id,
        source_type=SOURCE_TYPE_PARTICIPATION,
        deduplicate=True,
    )


def notify_participation_rejected(
    uow: UnitOfWork, *, event: Event, participation: EventParticipant
) -> list[NotificationDelivery]:
    return notify(
        uow,
        notification_type=NOTIFICATION_PARTICIPATION_REJECTED,
        title="Solicitação não aprovada",
        message=f'Sua solicitação para experienciar o evento "{event.name}" não foi aprovada.',
        recipient_ids=[participation.user_id],
        event_id=event.id,
        source_id=participation.id,
        source_type=SOURCE_TYPE_PARTICIPATION,
        deduplicate=True,
    )


def notify_event_canceled(
    uow: UnitOfWork, *, event: Event, participant_ids: Iterable[int]
) -> list[NotificationDelivery]:
    return notify(
        uow,
        notification_type=NOTIFICATION_EVENT_CANCELED,
        title="Evento cancelado",
        message=f'O evento "{event.name}" foi cancelado pelo organizador.',
        recipient_ids=participant_ids,
        event_id=event.id,
    )


def notify_co_organizer_invite(
    uow: UnitOfWork, *, event: Event, invite: EventCoOrganizerInvite, inviter: User
) -> list[NotificationDelivery]:
    if invite.invitee_id is None:
        return []
    return notify(
        uow,
        notification_type=NOTIFICATION_CO_ORGANIZER_INVITE,
        title="Convite para coorganizar",
        message=f'{inviter.full_name} convidou você para coorganizar o evento "{event.name}"',
        recipient_ids=[invite.invitee_id],
        event_id=event.id,
        source_id=invite.id,
        source_type=SOURCE_TYPE_CO_ORGANIZER_INVITE,
    )


__all__ = [
    "notify_co_organizer_invite",
    "notify_event_canceled",
    "notify_participant_request",
    "notify_participation_approved",
    "notify_participation_rejected",
]
