"""ORM models used by the application infrastructure."""

from .category import EventCategoryModel, EventSubcategoryModel
from .chat_message import ChatMessageModel
from .co_organizer import EventCoOrganizerInviteModel, EventCoOrganizerModel
from .event import EventModel
from .event_participant import EventParticipantModel
from .notification import NotificationModel, NotificationRecipientModel
from .user import UserModel

__all__ = [
    "ChatMessageModel",
    "EventCategoryModel",
    "EventCoOrganizerInviteModel",
    "EventCoOrganizerModel",
    "EventModel",
    "EventParticipantModel",
    "EventSubcategoryModel",
    "NotificationModel",
    "NotificationRecipientModel",
    "UserModel",
]
