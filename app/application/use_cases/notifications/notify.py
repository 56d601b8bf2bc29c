"""Create notifications and their per-recipient rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from app.domain.entities import Notification, NotificationDelivery
from app.infrastructure.notifications import dispatch_notifications
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def notify(
    uow: UnitOfWork,
    *,
    notification_type: str,
    title: str,
    message: str,
    recipient_ids: Iterable[int],
    event_id: int | None = None,
    source_id: int | None = None,
    source_type: str | None = None,
    deduplicate: bool = False,
    created_at: datetime | None = None,
) -> list[NotificationDelivery]:
    """Fan a notification out to ``recipient_ids`` inside ``uow``.

    Nothing is written for an empty recipient set. With ``deduplicate`` the
    call is a no-op when a notification with the same type, event and source
    already exists. Deliveries are pushed to websocket clients only after the
    surrounding transaction commits.
    """

    recipients = list(dict.fromkeys(user_id for user_id in recipient_ids if user_id))
    if not recipients:
        return []

    if deduplicate and uow.notifications.exists_for_source(
        notification_type=notification_type, event_id=event_id, source_id=source_id
    ):
        logger.info(
            "Skipping duplicate %s notification for event %s source %s",
            notification_type,
            event_id,
            source_id,
        )
        return []

    deliveries = uow.notifications.create(
        Notification(
            id=None,
            type=notification_type,
            title=title,
            message=message,
            event_id=event_id,
            source_id=source_id,
            source_type=source_type,
            created_at=created_at or now_in_app_timezone(),
        ),
        recipients,
    )
    logger.info(
        "Created %s notification for %s recipient(s)", notification_type, len(deliveries)
    )
    uow.after_commit(lambda: dispatch_notifications(deliveries))
    return deliveries


__all__ = ["notify"]
