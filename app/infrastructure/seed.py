"""Reference data inserted when the database is initialized."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.infrastructure.models import EventCategoryModel, EventSubcategoryModel

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[dict[str, object], ...] = (
    {"name": "Aniversário", "slug": "birthday", "color": "#a78bfa"},
    {"name": "Casamento", "slug": "wedding", "color": "#ec4899"},
    {"name": "Religioso", "slug": "religious", "color": "#8b5cf6"},
    {"name": "Reunião", "slug": "meeting", "color": "#3b82f6"},
    {"name": "Churrasco", "slug": "barbecue", "color": "#f59e0b"},
    {"name": "Festa", "slug": "party", "color": "#ec4899"},
    {"name": "Show", "slug": "concert", "color": "#10b981"},
    {"name": "LGBT+", "slug": "lgbt", "color": "pride"},
    {"name": "Eventos 18+", "slug": "adult", "color": "#ef4444", "age_restriction": 18},
)

DEFAULT_SUBCATEGORIES: dict[str, tuple[tuple[str, str], ...]] = {
    "party": (("Balada", "club"), ("Festa em casa", "house-party")),
    "concert": (("Rock", "rock"), ("Eletrônica", "electronic"), ("Samba", "samba")),
    "meeting": (("Workshop", "workshop"), ("Networking", "networking")),
}


def seed_reference_data(session: Session) -> None:
    """Insert the default categories and subcategories when missing."""

    existing = {slug for (slug,) in session.query(EventCategoryModel.slug).all()}
    created = 0
    for payload in DEFAULT_CATEGORIES:
        if payload["slug"] in existing:
            continue
        category = EventCategoryModel(**payload)
        for name, slug in DEFAULT_SUBCATEGORIES.get(str(payload["slug"]), ()):
            category.subcategories.append(EventSubcategoryModel(name=name, slug=slug))
        session.add(category)
        created += 1

    if created:
        session.commit()
        logger.info("Seeded %s event categories", created)


__all__ = ["DEFAULT_CATEGORIES", "DEFAULT_SUBCATEGORIES", "seed_reference_data"]
