"""Domain entities for co-organizer invitations and memberships."""

from dataclasses import dataclass
from datetime import datetime

INVITE_STATUS_PENDING = "pending"
INVITE_STATUS_ACCEPTED = "accepted"
INVITE_STATUS_REJECTED = "rejected"


@dataclass
class EventCoOrganizerInvite:
    """Invitation sent by an event creator to share management of the event."""

    id: int | None
    event_id: int
    inviter_id: int
    email: str
    token: str
    status: str
    message: str | None
    invitee_id: int | None
    invited_at: datetime | None
    responded_at: datetime | None

    def is_pending(self) -> bool:
        return self.status == INVITE_STATUS_PENDING


@dataclass
class EventCoOrganizer:
    """User holding creator-equivalent management rights on an event."""

    event_id: int
    user_id: int
    added_at: datetime | None


__all__ = [
    "EventCoOrganizer",
    "EventCoOrganizerInvite",
    "INVITE_STATUS_PENDING",
    "INVITE_STATUS_ACCEPTED",
    "INVITE_STATUS_REJECTED",
]
