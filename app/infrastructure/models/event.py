"""SQLAlchemy model for events."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class EventModel(Base):
    """Database representation of an event."""

    __tablename__ = "events"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    time_start = Column(String(10), nullable=False)
    time_end = Column(String(10), nullable=True)
    location = Column(String(255), nullable=False)
    coordinates = Column(String(100), nullable=True)
    cover_image = Column(String(255), nullable=True)
    category_id = Column(
        Integer, ForeignKey("event_categories.id"), nullable=False, index=True
    )
    subcategory_id = Column(
        Integer, ForeignKey("event_subcategories.id"), nullable=True
    )
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    event_type = Column(String(20), nullable=False, default="public")
    capacity = Column(Integer, nullable=True)
    ticket_price = Column(Float, nullable=True)
    important_info = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EventModel"]
