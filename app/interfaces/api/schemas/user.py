"""User schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=11, max_length=14, description="CPF do usuário")
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    birth_date: date | None = None
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)


class UserSummary(BaseModel):
    """Public data of a user shown next to events, participants and messages."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    profile_image: str | None = None


class UserProfile(UserSummary):
    city: str | None = None
    state: str | None = None
    biography: str | None = None
    email_verified: bool
    phone_verified: bool
    document_verified: bool
    created_at: datetime | None = None


class UserRead(UserProfile):
    """Full account data, only returned to its owner."""

    username: str
    email: EmailStr
    phone: str | None = None
    birth_date: date | None = None
    is_admin: bool
    last_login: datetime | None = None
