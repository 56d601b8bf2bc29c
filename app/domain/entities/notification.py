"""Domain entities representing notifications and their recipients."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_PARTICIPANT_REQUEST = "participant_request"
NOTIFICATION_PARTICIPATION_APPROVED = "participation_approved"
NOTIFICATION_PARTICIPATION_REJECTED = "participation_rejected"
NOTIFICATION_EVENT_CANCELED = "event_canceled"
NOTIFICATION_CO_ORGANIZER_INVITE = "co_organizer_invite"

SOURCE_TYPE_PARTICIPATION = "participation"
SOURCE_TYPE_CO_ORGANIZER_INVITE = "co_organizer_invite"


@dataclass
class Notification:
    """Message produced as a side effect of a domain event."""

    id: int | None
    type: str
    title: str
    message: str
    event_id: int | None = None
    source_id: int | None = None
    source_type: str | None = None
    created_at: datetime | None = None


@dataclass
class NotificationRecipient:
    """Per-user read and deletion state of a :class:`Notification`."""

    id: int | None
    notification_id: int
    user_id: int
    read: bool = False
    read_at: datetime | None = None
    deleted_at: datetime | None = None

    def is_live(self) -> bool:
        return self.deleted_at is None


@dataclass
class NotificationDelivery:
    """A recipient row paired with the notification it points to."""

    recipient: NotificationRecipient
    notification: Notification


__all__ = [
    "Notification",
    "NotificationRecipient",
    "NotificationDelivery",
    "NOTIFICATION_PARTICIPANT_REQUEST",
    "NOTIFICATION_PARTICIPATION_APPROVED",
    "NOTIFICATION_PARTICIPATION_REJECTED",
    "NOTIFICATION_EVENT_CANCELED",
    "NOTIFICATION_CO_ORGANIZER_INVITE",
    "SOURCE_TYPE_PARTICIPATION",
    "SOURCE_TYPE_CO_ORGANIZER_INVITE",
]
