"""SQLAlchemy model for event chat messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ChatMessageModel(Base):
    """Database representation of a chat message."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    sent_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ChatMessageModel"]
