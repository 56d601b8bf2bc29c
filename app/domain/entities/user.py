"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    password: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    birth_date: date | None = None
    city: str | None = None
    state: str | None = None
    biography: str | None = None
    profile_image: str | None = None
    is_active: bool = True
    is_admin: bool = False
    email_verified: bool = False
    phone_verified: bool = False
    document_verified: bool = False
    last_login: datetime | None = None
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        """Return the user's first and last name joined by a space."""

        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["User"]
