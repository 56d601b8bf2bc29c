"""Event schemas."""

from datetime import date as EventDate, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .category import CategoryRead
from .participation import ParticipantRead
from .user import UserSummary

EventType = Literal["public", "private_ticket", "private_application"]


class EventCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: EventDate
    time_start: str = Field(..., description="Horário de início no formato HH:MM")
    time_end: str | None = None
    location: str = Field(..., min_length=1, max_length=255)
    coordinates: str | None = Field(default=None, max_length=100)
    cover_image: str | None = Field(default=None, max_length=255)
    category_id: int = Field(..., ge=1)
    subcategory_id: int | None = Field(default=None, ge=1)
    event_type: EventType = "public"
    capacity: int | None = Field(default=None, ge=1)
    ticket_price: float | None = Field(default=None, ge=0)
    important_info: str | None = None


class EventUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    date: EventDate | None = None
    time_start: str | None = None
    time_end: str | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    coordinates: str | None = Field(default=None, max_length=100)
    cover_image: str | None = Field(default=None, max_length=255)
    category_id: int | None = Field(default=None, ge=1)
    subcategory_id: int | None = Field(default=None, ge=1)
    event_type: EventType | None = None
    capacity: int | None = Field(default=None, ge=1)
    ticket_price: float | None = Field(default=None, ge=0)
    important_info: str | None = None
    is_active: bool | None = None


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    date: EventDate
    time_start: str
    time_end: str | None = None
    location: str
    coordinates: str | None = None
    cover_image: str | None = None
    category_id: int
    subcategory_id: int | None = None
    creator_id: int
    event_type: EventType
    capacity: int | None = None
    ticket_price: float | None = None
    important_info: str | None = None
    is_active: bool
    created_at: datetime | None = None


class EventDetailRead(EventRead):
    category: CategoryRead | None = None
    creator: UserSummary | None = None
    participants: list[ParticipantRead] = Field(default_factory=list)


class SharedEventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    date: str = Field(..., description="Data no formato DD/MM/AAAA")
    time: str
    location: str
    category: str
    creator: str


class EventShareRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    link: str
    title: str
    description: str
    image: str | None = None
    event: SharedEventRead
