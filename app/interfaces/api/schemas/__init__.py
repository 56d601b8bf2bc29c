from .auth import ChangePasswordRequest, RegisterResponse, Token
from .category import CategoryRead, SubcategoryRead
from .chat import ChatMessageCreate, ChatMessageRead
from .co_organizer import CoOrganizerInviteCreate, CoOrganizerInviteRead, CoOrganizerRead
from .common import MessageResponse
from .event import (
    EventCreate,
    EventDetailRead,
    EventRead,
    EventShareRead,
    EventUpdate,
    SharedEventRead,
)
from .notification import (
    MarkAllReadResponse,
    NotificationContentRead,
    NotificationRead,
    NotificationRecipientRead,
    UnreadCountResponse,
)
from .participation import ParticipantRead, ParticipationRead, ParticipationRequest
from .user import UserCreate, UserProfile, UserRead, UserSummary

__all__ = [
    "CategoryRead",
    "ChangePasswordRequest",
    "ChatMessageCreate",
    "ChatMessageRead",
    "CoOrganizerInviteCreate",
    "CoOrganizerInviteRead",
    "CoOrganizerRead",
    "EventCreate",
    "EventDetailRead",
    "EventRead",
    "EventShareRead",
    "EventUpdate",
    "MarkAllReadResponse",
    "MessageResponse",
    "NotificationContentRead",
    "NotificationRead",
    "NotificationRecipientRead",
    "ParticipantRead",
    "ParticipationRead",
    "ParticipationRequest",
    "RegisterResponse",
    "SharedEventRead",
    "Token",
    "UnreadCountResponse",
    "UserCreate",
    "UserProfile",
    "UserRead",
    "UserSummary",
]
