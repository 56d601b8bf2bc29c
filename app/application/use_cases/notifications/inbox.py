"""Use cases for reading and tidying a user's notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NotificationDelivery
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import NotificationRepository
from app.infrastructure.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def list_notifications(session: Session, *, user_id: int) -> Sequence[NotificationDelivery]:
    """Return the live notifications of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id)


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread_for_user(user_id)


def _get_owned_recipient(
    uow: UnitOfWork, recipient_id: int, user_id: int
) -> NotificationDelivery:
    delivery = uow.notifications.get_recipient(recipient_id)
    if (
        delivery is None
        or delivery.recipient.user_id != user_id
        or not delivery.recipient.is_live()
    ):
        raise NotFoundError("Notificação não encontrada")
    return delivery


def mark_notification_read(
    session: Session, *, recipient_id: int, user_id: int
) -> NotificationDelivery:
    with UnitOfWork(session) as uow:
        _get_owned_recipient(uow, recipient_id, user_id)
        delivery = uow.notifications.mark_as_read(recipient_id)
        uow.commit()
    return delivery


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    with UnitOfWork(session) as uow:
        updated = uow.notifications.mark_all_as_read(user_id)
        uow.commit()
    return updated


def delete_notification(session: Session, *, recipient_id: int, user_id: int) -> None:
    """Hide a notification for ``user_id``.

    The shared notification row is removed once no recipient can still see it.
    """

    with UnitOfWork(session) as uow:
        delivery = _get_owned_recipient(uow, recipient_id, user_id)
        uow.notifications.soft_delete_recipient(recipient_id)
        notification_id = delivery.notification.id
        if uow.notifications.count_live_recipients(notification_id) == 0:
            uow.notifications.delete(notification_id)
            logger.info("Deleted notification %s with no remaining recipients", notification_id)
        uow.commit()


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
