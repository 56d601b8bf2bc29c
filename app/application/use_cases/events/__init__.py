"""Use cases for managing events."""

from .create_event import create_event
from .delete_event import delete_event
from .permissions import (
    ensure_event_creator,
    ensure_event_manager,
    is_event_manager,
    load_event,
)
from .queries import (
    EventDetails,
    ParticipantEntry,
    get_event,
    list_created_events,
    list_events,
    list_participants,
    list_participating_events,
    search_events,
)
from .share_event import EventShare, SharedEventSummary, share_event
from .update_event import update_event

__all__ = [
    "EventDetails",
    "EventShare",
    "ParticipantEntry",
    "SharedEventSummary",
    "create_event",
    "delete_event",
    "ensure_event_creator",
    "ensure_event_manager",
    "get_event",
    "is_event_manager",
    "list_created_events",
    "list_events",
    "list_participants",
    "list_participating_events",
    "load_event",
    "search_events",
    "share_event",
    "update_event",
]
