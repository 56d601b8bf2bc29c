"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from anyio import from_thread

from app.domain.entities import NotificationDelivery

from .manager import NotificationSocketRegistry, notification_sockets

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notification deliveries and schedule them on the event loop."""

    def __init__(self, sockets: NotificationSocketRegistry) -> None:
        self._sockets = sockets

    def dispatch(self, delivery: NotificationDelivery) -> None:
        """Schedule ``delivery`` for its recipient when they are connected."""

        user_id = delivery.recipient.user_id
        if not self._sockets.has_subscribers(user_id):
            return

        message = {"type": "notification", "data": serialize_delivery(delivery)}
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._sockets.push, user_id, message)
            except RuntimeError:
                # Not inside an anyio worker thread (scripts, plain tests).
                logger.debug("No event loop available to push notification to %s", user_id)
        else:
            loop.create_task(self._sockets.push(user_id, message))

    def dispatch_many(self, deliveries: Iterable[NotificationDelivery]) -> None:
        for delivery in deliveries:
            self.dispatch(delivery)


def serialize_delivery(delivery: NotificationDelivery) -> dict[str, Any]:
    """Return the JSON payload for a recipient row and its notification."""

    recipient = delivery.recipient
    notification = delivery.notification
    return {
        "recipient": {
            "id": recipient.id,
            "notification_id": recipient.notification_id,
            "user_id": recipient.user_id,
            "read": recipient.read,
            "read_at": recipient.read_at.isoformat() if recipient.read_at else None,
        },
        "notification": {
            "id": notification.id,
            "type": notification.type,
            "title": notification.title,
            "message": notification.message,
            "event_id": notification.event_id,
            "source_id": notification.source_id,
            "source_type": notification.source_type,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
        },
    }


notification_publisher = NotificationPublisher(notification_sockets)


def dispatch_notifications(deliveries: Iterable[NotificationDelivery]) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch_many(deliveries)


__all__ = [
    "NotificationPublisher",
    "dispatch_notifications",
    "notification_publisher",
    "serialize_delivery",
]
