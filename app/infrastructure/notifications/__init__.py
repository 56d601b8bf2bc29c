"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationSocketRegistry, notification_sockets
from .publisher import (
    NotificationPublisher,
    dispatch_notifications,
    notification_publisher,
    serialize_delivery,
)

__all__ = [
    "NotificationSocketRegistry",
    "notification_sockets",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notifications",
    "serialize_delivery",
]
