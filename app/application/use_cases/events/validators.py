"""Validation helpers for event payloads."""

from __future__ import annotations

import re

from app.domain.entities import EVENT_TYPES
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.unit_of_work import UnitOfWork

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def ensure_valid_event_type(event_type: str) -> None:
    if event_type not in EVENT_TYPES:
        allowed = ", ".join(EVENT_TYPES)
        raise ValidationError(f"Tipo de evento inválido. Valores permitidos: {allowed}")


def ensure_valid_time(value: str | None, *, field: str) -> None:
    if value is not None and not _TIME_PATTERN.match(value):
        raise ValidationError(f"{field} deve estar no formato HH:MM")


def ensure_category(
    uow: UnitOfWork, category_id: int, subcategory_id: int | None
) -> None:
    """Check that the category exists and owns ``subcategory_id``."""

    if uow.categories.get(category_id) is None:
        raise NotFoundError("Categoria não encontrada")
    if subcategory_id is None:
        return
    subcategory = uow.categories.get_subcategory(subcategory_id)
    if subcategory is None:
        raise NotFoundError("Subcategoria não encontrada")
    if subcategory.category_id != category_id:
        raise ValidationError("A subcategoria não pertence à categoria informada")


def ensure_non_negative(value: float | int | None, *, field: str) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{field} não pode ser negativo")
