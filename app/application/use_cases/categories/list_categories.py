"""Use cases for listing categories and subcategories."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import EventCategory, EventSubcategory
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import CategoryRepository


def list_categories(session: Session) -> Sequence[EventCategory]:
    """Return every category ordered by identifier."""

    return CategoryRepository(session).list()


def list_subcategories(
    session: Session, *, category_id: int | None = None
) -> Sequence[EventSubcategory]:
    """Return subcategories, optionally restricted to ``category_id``."""

    repository = CategoryRepository(session)
    if category_id is not None and repository.get(category_id) is None:
        raise NotFoundError("Categoria não encontrada")
    return repository.list_subcategories(category_id=category_id)
