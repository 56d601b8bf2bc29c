"""Participation schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummary


class ParticipationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    application_reason: str | None = Field(default=None, max_length=1000)


class ParticipationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    user_id: int
    status: Literal["pending", "approved", "confirmed", "rejected"]
    application_reason: str | None = None
    reviewed_by: int | None = None
    reviewed_at: datetime | None = None
    created_at: datetime | None = None


class ParticipantRead(ParticipationRead):
    user: UserSummary | None = None
