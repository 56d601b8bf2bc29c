"""Repository implementations for infrastructure layer."""

from .category_repository import CategoryRepository
from .chat_message_repository import ChatMessageRepository
from .co_organizer_repository import CoOrganizerRepository
from .event_repository import EventRepository
from .notification_repository import NotificationRepository
from .participation_repository import ParticipationRepository
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "ChatMessageRepository",
    "CoOrganizerRepository",
    "EventRepository",
    "NotificationRepository",
    "ParticipationRepository",
    "UserRepository",
]
