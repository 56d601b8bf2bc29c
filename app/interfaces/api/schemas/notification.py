"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationContentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    title: str
    message: str
    event_id: int | None = None
    source_id: int | None = None
    source_type: str | None = None
    created_at: datetime | None = None


class NotificationRecipientRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    notification_id: int
    user_id: int
    read: bool
    read_at: datetime | None = None


class NotificationRead(BaseModel):
    """A recipient row paired with the notification it points to."""

    model_config = ConfigDict(from_attributes=True)

    recipient: NotificationRecipientRead
    notification: NotificationContentRead


class MarkAllReadResponse(BaseModel):
    updated: int


class UnreadCountResponse(BaseModel):
    count: int
