"""Co-organizer schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .user import UserSummary


class CoOrganizerInviteCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    message: str | None = Field(default=None, max_length=1000)


class CoOrganizerInviteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    inviter_id: int
    email: str
    status: Literal["pending", "accepted", "rejected"]
    message: str | None = None
    invitee_id: int | None = None
    invited_at: datetime | None = None
    responded_at: datetime | None = None


class CoOrganizerRead(BaseModel):
    event_id: int
    user_id: int
    added_at: datetime | None = None
    user: UserSummary | None = None
