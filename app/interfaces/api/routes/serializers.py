"""Conversions from use-case results to response schemas."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from app.application.use_cases.co_organizers import CoOrganizerEntry
from app.application.use_cases.events import EventDetails, ParticipantEntry
from app.domain.entities import ChatMessage, Event, NotificationDelivery, User
from app.interfaces.api.schemas import (
    CategoryRead,
    ChatMessageRead,
    CoOrganizerRead,
    EventDetailRead,
    EventRead,
    NotificationRead,
    ParticipantRead,
    UserSummary,
)


def user_summary(user: User | None) -> UserSummary | None:
    return UserSummary.model_validate(user) if user is not None else None


def event_to_schema(event: Event) -> EventRead:
    return EventRead.model_validate(event)


def events_to_schema(events: Iterable[Event]) -> list[EventRead]:
    return [event_to_schema(event) for event in events]


def participant_to_schema(entry: ParticipantEntry) -> ParticipantRead:
    payload = ParticipantRead.model_validate(entry.participation)
    payload.user = user_summary(entry.user)
    return payload


def event_details_to_schema(details: EventDetails) -> EventDetailRead:
    payload = EventDetailRead.model_validate(details.event)
    payload.category = (
        CategoryRead.model_validate(details.category) if details.category else None
    )
    payload.creator = user_summary(details.creator)
    payload.participants = [participant_to_schema(item) for item in details.participants]
    return payload


def notification_to_schema(delivery: NotificationDelivery) -> NotificationRead:
    return NotificationRead.model_validate(delivery)


def chat_message_to_schema(
    message: ChatMessage, senders: Mapping[int, User]
) -> ChatMessageRead:
    payload = ChatMessageRead.model_validate(message)
    payload.sender = user_summary(senders.get(message.sender_id))
    return payload


def co_organizer_to_schema(entry: CoOrganizerEntry) -> CoOrganizerRead:
    return CoOrganizerRead(
        event_id=entry.membership.event_id,
        user_id=entry.membership.user_id,
        added_at=entry.membership.added_at,
        user=user_summary(entry.user),
    )
