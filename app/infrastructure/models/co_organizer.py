"""SQLAlchemy models for co-organizer invitations and memberships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class EventCoOrganizerInviteModel(Base):
    """Database representation of an invitation to co-organize an event."""

    __tablename__ = "event_co_organizer_invites"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    inviter_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    email = Column(String(255), nullable=False)
    token = Column(String(255), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default="pending")
    message = Column(Text, nullable=True)
    invitee_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    invited_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    responded_at = Column(DateTime, nullable=True)


class EventCoOrganizerModel(Base):
    """Association granting a user management rights on an event."""

    __tablename__ = "event_co_organizers"

    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    added_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EventCoOrganizerInviteModel", "EventCoOrganizerModel"]
