"""Domain entity representing an event."""

from dataclasses import dataclass
from datetime import date, datetime

EVENT_TYPE_PUBLIC = "public"
EVENT_TYPE_PRIVATE_TICKET = "private_ticket"
EVENT_TYPE_PRIVATE_APPLICATION = "private_application"

EVENT_TYPES = (
    EVENT_TYPE_PUBLIC,
    EVENT_TYPE_PRIVATE_TICKET,
    EVENT_TYPE_PRIVATE_APPLICATION,
)


@dataclass
class Event:
    """Activity published by a user that others can join."""

    id: int | None
    name: str
    description: str
    date: date
    time_start: str
    time_end: str | None
    location: str
    coordinates: str | None
    cover_image: str | None
    category_id: int
    subcategory_id: int | None
    creator_id: int
    event_type: str
    capacity: int | None
    ticket_price: float | None
    important_info: str | None
    is_active: bool
    created_at: datetime | None

    def requires_application(self) -> bool:
        """Return ``True`` when participants must be approved by the creator."""

        return self.event_type == EVENT_TYPE_PRIVATE_APPLICATION


__all__ = [
    "Event",
    "EVENT_TYPES",
    "EVENT_TYPE_PUBLIC",
    "EVENT_TYPE_PRIVATE_TICKET",
    "EVENT_TYPE_PRIVATE_APPLICATION",
]
