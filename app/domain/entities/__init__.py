"""Domain entities exposed by the application."""

from .category import EventCategory, EventSubcategory
from .chat_message import ChatMessage
from .co_organizer import (
    INVITE_STATUS_ACCEPTED,
    INVITE_STATUS_PENDING,
    INVITE_STATUS_REJECTED,
    EventCoOrganizer,
    EventCoOrganizerInvite,
)
from .event import (
    EVENT_TYPE_PRIVATE_APPLICATION,
    EVENT_TYPE_PRIVATE_TICKET,
    EVENT_TYPE_PUBLIC,
    EVENT_TYPES,
    Event,
)
from .notification import (
    NOTIFICATION_CO_ORGANIZER_INVITE,
    NOTIFICATION_EVENT_CANCELED,
    NOTIFICATION_PARTICIPANT_REQUEST,
    NOTIFICATION_PARTICIPATION_APPROVED,
    NOTIFICATION_PARTICIPATION_REJECTED,
    SOURCE_TYPE_CO_ORGANIZER_INVITE,
    SOURCE_TYPE_PARTICIPATION,
    Notification,
    NotificationDelivery,
    NotificationRecipient,
)
from .participation import (
    PARTICIPATION_STATUS_APPROVED,
    PARTICIPATION_STATUS_CONFIRMED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    PARTICIPATION_STATUSES,
    EventParticipant,
)
from .user import User

__all__ = [
    "ChatMessage",
    "Event",
    "EventCategory",
    "EventCoOrganizer",
    "EventCoOrganizerInvite",
    "EventParticipant",
    "EventSubcategory",
    "Notification",
    "NotificationDelivery",
    "NotificationRecipient",
    "User",
    "EVENT_TYPES",
    "EVENT_TYPE_PUBLIC",
    "EVENT_TYPE_PRIVATE_TICKET",
    "EVENT_TYPE_PRIVATE_APPLICATION",
    "INVITE_STATUS_PENDING",
    "INVITE_STATUS_ACCEPTED",
    "INVITE_STATUS_REJECTED",
    "NOTIFICATION_PARTICIPANT_REQUEST",
    "NOTIFICATION_PARTICIPATION_APPROVED",
    "NOTIFICATION_PARTICIPATION_REJECTED",
    "NOTIFICATION_EVENT_CANCELED",
    "NOTIFICATION_CO_ORGANIZER_INVITE",
    "PARTICIPATION_STATUSES",
    "PARTICIPATION_STATUS_PENDING",
    "PARTICIPATION_STATUS_APPROVED",
    "PARTICIPATION_STATUS_CONFIRMED",
    "PARTICIPATION_STATUS_REJECTED",
    "SOURCE_TYPE_PARTICIPATION",
    "SOURCE_TYPE_CO_ORGANIZER_INVITE",
]
