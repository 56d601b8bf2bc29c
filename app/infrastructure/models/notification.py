"""SQLAlchemy models for notifications and their recipients."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a notification shared by its recipients."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(50), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    # No foreign key: cancellation notices outlive the deleted event.
    event_id = Column(Integer, nullable=True, index=True)
    source_id = Column(Integer, nullable=True)
    source_type = Column(String(50), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    recipients = relationship(
        "NotificationRecipientModel",
        back_populates="notification",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class NotificationRecipientModel(Base):
    """Per-user read and deletion state of a notification."""

    __tablename__ = "notification_recipients"

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(
        Integer,
        ForeignKey("notifications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    read = Column(Boolean, nullable=False, default=False)
    read_at = Column(DateTime(), nullable=True)
    deleted_at = Column(DateTime(), nullable=True)

    notification = relationship(
        "NotificationModel", back_populates="recipients", lazy="joined"
    )


__all__ = ["NotificationModel", "NotificationRecipientModel"]
