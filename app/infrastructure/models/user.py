"""SQLAlchemy model for the users table."""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # CPF used as login name
    username = Column(String(20), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(20), nullable=True)
    birth_date = Column(Date, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    biography = Column(Text, nullable=True)
    profile_image = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_admin = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    email_verified = Column(Boolean, nullable=False, default=False)
    phone_verified = Column(Boolean, nullable=False, default=False)
    document_verified = Column(Boolean, nullable=False, default=False)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
