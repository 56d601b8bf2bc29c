"""Use case for publishing a new event."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import EVENT_TYPE_PUBLIC, Event
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

from .validators import (
    ensure_category,
    ensure_non_negative,
    ensure_valid_event_type,
    ensure_valid_time,
)

logger = logging.getLogger(__name__)


def create_event(
    session: Session,
    *,
    creator_id: int,
    name: str,
    description: str,
    date: date,
    time_start: str,
    location: str,
    category_id: int,
    event_type: str = EVENT_TYPE_PUBLIC,
    time_end: str | None = None,
    coordinates: str | None = None,
    cover_image: str | None = None,
    subcategory_id: int | None = None,
    capacity: int | None = None,
    ticket_price: float | None = None,
    important_info: str | None = None,
) -> Event:
    """Create an event owned by ``creator_id``."""

    if not name.strip():
        raise ValidationError("O nome do evento é obrigatório")
    ensure_valid_event_type(event_type)
    ensure_valid_time(time_start, field="time_start")
    ensure_valid_time(time_end, field="time_end")
    ensure_non_negative(capacity, field="capacity")
    ensure_non_negative(ticket_price, field="ticket_price")

    with UnitOfWork(session) as uow:
        if uow.users.get(creator_id) is None:
            raise NotFoundError("Usuário não encontrado")
        ensure_category(uow, category_id, subcategory_id)

        event = uow.events.create(
            Event(
                id=None,
                name=name.strip(),
                description=description,
                date=date,
                time_start=time_start,
                time_end=time_end,
                location=location,
                coordinates=coordinates,
                cover_image=cover_image,
                category_id=category_id,
                subcategory_id=subcategory_id,
                creator_id=creator_id,
                event_type=event_type,
                capacity=capacity,
                ticket_price=ticket_price,
                important_info=important_info,
                is_active=True,
                created_at=now_in_app_timezone(),
            )
        )
        uow.commit()

    logger.info("User %s created event %s (%s)", creator_id, event.id, event.event_type)
    return event
