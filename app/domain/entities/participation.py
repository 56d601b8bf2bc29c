"""Domain entity representing a user's participation in an event."""

from dataclasses import dataclass
from datetime import datetime

PARTICIPATION_STATUS_PENDING = "pending"
PARTICIPATION_STATUS_APPROVED = "approved"
PARTICIPATION_STATUS_CONFIRMED = "confirmed"
PARTICIPATION_STATUS_REJECTED = "rejected"

PARTICIPATION_STATUSES = (
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_APPROVED,
    PARTICIPATION_STATUS_CONFIRMED,
    PARTICIPATION_STATUS_REJECTED,
)


@dataclass
class EventParticipant:
    """Status-bearing link between a user and an event."""

    id: int | None
    event_id: int
    user_id: int
    status: str
    application_reason: str | None
    reviewed_by: int | None
    reviewed_at: datetime | None
    created_at: datetime | None

    def is_pending(self) -> bool:
        return self.status == PARTICIPATION_STATUS_PENDING

    def is_approved(self) -> bool:
        return self.status == PARTICIPATION_STATUS_APPROVED


__all__ = [
    "EventParticipant",
    "PARTICIPATION_STATUSES",
    "PARTICIPATION_STATUS_PENDING",
    "PARTICIPATION_STATUS_APPROVED",
    "PARTICIPATION_STATUS_CONFIRMED",
    "PARTICIPATION_STATUS_REJECTED",
]
