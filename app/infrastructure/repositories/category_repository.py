"""Persistence helpers for event categories."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import EventCategory, EventSubcategory
from app.infrastructure.models import EventCategoryModel, EventSubcategoryModel


class CategoryRepository:
    """Read access to categories and subcategories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[EventCategory]:
        query = self.session.query(EventCategoryModel).order_by(EventCategoryModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, category_id: int) -> EventCategory | None:
        model = self.session.get(EventCategoryModel, category_id)
        return self._to_entity(model) if model else None

    def get_by_slug(self, slug: str) -> EventCategory | None:
        model = self.session.query(EventCategoryModel).filter_by(slug=slug).first()
        return self._to_entity(model) if model else None

    def get_map_by_ids(self, category_ids: Sequence[int]) -> dict[int, EventCategory]:
        if not category_ids:
            return {}
        query = self.session.query(EventCategoryModel).filter(
            EventCategoryModel.id.in_(set(category_ids))
        )
        return {model.id: self._to_entity(model) for model in query.all()}

    def list_subcategories(
        self, *, category_id: int | None = None
    ) -> Sequence[EventSubcategory]:
        query = self.session.query(EventSubcategoryModel)
        if category_id is not None:
            query = query.filter(EventSubcategoryModel.category_id == category_id)
        query = query.order_by(EventSubcategoryModel.id)
        return [self._subcategory_to_entity(model) for model in query.all()]

    def get_subcategory(self, subcategory_id: int) -> EventSubcategory | None:
        model = self.session.get(EventSubcategoryModel, subcategory_id)
        return self._subcategory_to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: EventCategoryModel) -> EventCategory:
        return EventCategory(
            id=model.id,
            name=model.name,
            slug=model.slug,
            color=model.color,
            age_restriction=model.age_restriction,
        )

    @staticmethod
    def _subcategory_to_entity(model: EventSubcategoryModel) -> EventSubcategory:
        return EventSubcategory(
            id=model.id,
            category_id=model.category_id,
            name=model.name,
            slug=model.slug,
        )


__all__ = ["CategoryRepository"]
