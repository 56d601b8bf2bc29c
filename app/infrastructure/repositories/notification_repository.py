"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationDelivery,
    NotificationRecipient,
)
from app.infrastructure.models import NotificationModel, NotificationRecipientModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for notifications and their recipient rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self, notification: Notification, recipient_ids: Iterable[int]
    ) -> list[NotificationDelivery]:
        """Persist ``notification`` with one recipient row per distinct user."""

        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        seen: set[int] = set()
        for user_id in recipient_ids:
            if user_id is None or user_id in seen:
                continue
            seen.add(user_id)
            model.recipients.append(NotificationRecipientModel(user_id=user_id, read=False))
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        entity = self._to_entity(model)
        return [
            NotificationDelivery(
                recipient=self._recipient_to_entity(recipient), notification=entity
            )
            for recipient in sorted(model.recipients, key=lambda item: item.id)
        ]

    def exists_for_source(
        self, *, notification_type: str, event_id: int | None, source_id: int | None
    ) -> bool:
        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.type == notification_type,
            NotificationModel.event_id == event_id,
            NotificationModel.source_id == source_id,
        )
        return query.first() is not None

    def list_for_user(
        self, user_id: int, *, limit: int | None = None
    ) -> Sequence[NotificationDelivery]:
        query = (
            self.session.query(NotificationRecipientModel)
            .join(NotificationRecipientModel.notification)
            .filter(NotificationRecipientModel.user_id == user_id)
            .filter(NotificationRecipientModel.deleted_at.is_(None))
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_delivery(model) for model in query.all()]

    def count_unread_for_user(self, user_id: int) -> int:
        return (
            self.session.query(func.count(NotificationRecipientModel.id))
            .filter(NotificationRecipientModel.user_id == user_id)
            .filter(NotificationRecipientModel.deleted_at.is_(None))
            .filter(NotificationRecipientModel.read.is_(False))
            .scalar()
            or 0
        )

    def get_recipient(self, recipient_id: int) -> NotificationDelivery | None:
        model = self.session.get(NotificationRecipientModel, recipient_id)
        return self._to_delivery(model) if model else None

    def mark_as_read(self, recipient_id: int) -> NotificationDelivery:
        model = self._get_recipient_model(recipient_id)
        if not model.read:
            model.read = True
            model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.flush()
        return self._to_delivery(model)

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationRecipientModel)
            .filter(
                NotificationRecipientModel.user_id == user_id,
                NotificationRecipientModel.deleted_at.is_(None),
                NotificationRecipientModel.read.is_(False),
            )
            .update(
                {
                    NotificationRecipientModel.read: True,
                    NotificationRecipientModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.flush()
        return updated

    def soft_delete_recipient(self, recipient_id: int) -> None:
        model = self._get_recipient_model(recipient_id)
        if model.deleted_at is None:
            model.deleted_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.flush()

    def count_live_recipients(self, notification_id: int) -> int:
        return (
            self.session.query(func.count(NotificationRecipientModel.id))
            .filter(NotificationRecipientModel.notification_id == notification_id)
            .filter(NotificationRecipientModel.deleted_at.is_(None))
            .scalar()
            or 0
        )

    def delete(self, notification_id: int) -> None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.flush()

    def _get_recipient_model(self, recipient_id: int) -> NotificationRecipientModel:
        model = self.session.get(NotificationRecipientModel, recipient_id)
        if model is None:
            msg = f"Notification recipient with id {recipient_id} not found"
            raise ValueError(msg)
        return model

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.type = notification.type
        model.title = notification.title
        model.message = notification.message
        model.event_id = notification.event_id
        model.source_id = notification.source_id
        model.source_type = notification.source_type

    @classmethod
    def _to_delivery(cls, model: NotificationRecipientModel) -> NotificationDelivery:
        return NotificationDelivery(
            recipient=cls._recipient_to_entity(model),
            notification=cls._to_entity(model.notification),
        )

    @staticmethod
    def _recipient_to_entity(model: NotificationRecipientModel) -> NotificationRecipient:
        return NotificationRecipient(
            id=model.id,
            notification_id=model.notification_id,
            user_id=model.user_id,
            read=bool(model.read),
            read_at=ensure_app_timezone(model.read_at),
            deleted_at=ensure_app_timezone(model.deleted_at),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            type=model.type,
            title=model.title,
            message=model.message,
            event_id=model.event_id,
            source_id=model.source_id,
            source_type=model.source_type,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
