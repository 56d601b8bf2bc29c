"""Use case for editing an event."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.domain.errors import ValidationError
from app.infrastructure.unit_of_work import UnitOfWork

from .permissions import ensure_event_manager, load_event
from .validators import (
    ensure_category,
    ensure_non_negative,
    ensure_valid_event_type,
    ensure_valid_time,
)

_EDITABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "date",
        "time_start",
        "time_end",
        "location",
        "coordinates",
        "cover_image",
        "category_id",
        "subcategory_id",
        "event_type",
        "capacity",
        "ticket_price",
        "important_info",
        "is_active",
    }
)

_REQUIRED_FIELDS = frozenset(
    {
        "name",
        "description",
        "date",
        "time_start",
        "location",
        "category_id",
        "event_type",
        "is_active",
    }
)


def update_event(
    session: Session, *, event_id: int, actor_id: int, changes: dict[str, Any]
) -> Event:
    """Apply ``changes`` to the event. Only its managers may edit it."""

    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"Campos não editáveis: {', '.join(sorted(unknown))}")
    cleared = sorted(
        field for field in _REQUIRED_FIELDS if field in changes and changes[field] is None
    )
    if cleared:
        raise ValidationError(
            f"Campos obrigatórios não podem ser nulos: {', '.join(cleared)}"
        )

    with UnitOfWork(session) as uow:
        current = load_event(uow, event_id)
        ensure_event_manager(uow, current, actor_id)

        updated = replace(current, **changes)
        if not updated.name.strip():
            raise ValidationError("O nome do evento é obrigatório")
        ensure_valid_event_type(updated.event_type)
        ensure_valid_time(updated.time_start, field="time_start")
        ensure_valid_time(updated.time_end, field="time_end")
        ensure_non_negative(updated.capacity, field="capacity")
        ensure_non_negative(updated.ticket_price, field="ticket_price")
        if "category_id" in changes or "subcategory_id" in changes:
            ensure_category(uow, updated.category_id, updated.subcategory_id)

        event = uow.events.update(updated)
        uow.commit()
    return event
