"""Notification fan-out and inbox use cases."""

from .inbox import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .lifecycle import (
    notify_co_organizer_invite,
    notify_event_canceled,
    notify_participant_request,
    notify_participation_approved,
    notify_participation_rejected,
)
from .notify import notify

__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify",
    "notify_co_organizer_invite",
    "notify_event_canceled",
    "notify_participant_request",
    "notify_participation_approved",
    "notify_participation_rejected",
]
