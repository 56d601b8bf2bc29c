"""SQLAlchemy models for event categories and subcategories."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class EventCategoryModel(Base):
    """Database representation of an event category."""

    __tablename__ = "event_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True)
    color = Column(String(50), nullable=False)
    age_restriction = Column(Integer, nullable=True)

    subcategories = relationship(
        "EventSubcategoryModel",
        back_populates="category",
        cascade="all, delete-orphan",
    )


class EventSubcategoryModel(Base):
    """Database representation of an event subcategory."""

    __tablename__ = "event_subcategories"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(
        Integer, ForeignKey("event_categories.id"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False)

    category = relationship("EventCategoryModel", back_populates="subcategories")


__all__ = ["EventCategoryModel", "EventSubcategoryModel"]
