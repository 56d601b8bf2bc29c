"""Persistence layer for events."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.infrastructure.models import EventModel, EventParticipantModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class EventRepository:
    """Provide CRUD operations for :class:`Event` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return self._to_entity(model) if model else None

    def list(self, *, category_id: int | None = None) -> Sequence[Event]:
        query = self.session.query(EventModel).filter(EventModel.is_active.is_(True))
        if category_id is not None:
            query = query.filter(EventModel.category_id == category_id)
        query = query.order_by(EventModel.date.asc(), EventModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def list_by_creator(self, creator_id: int) -> Sequence[Event]:
        query = (
            self.session.query(EventModel)
            .filter(EventModel.creator_id == creator_id)
            .order_by(EventModel.created_at.desc(), EventModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_participant(self, user_id: int) -> Sequence[Event]:
        query = (
            self.session.query(EventModel)
            .join(EventParticipantModel, EventParticipantModel.event_id == EventModel.id)
            .filter(EventParticipantModel.user_id == user_id)
            .order_by(EventModel.date.asc(), EventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def search(self, term: str) -> Sequence[Event]:
        pattern = f"%{term.lower()}%"
        query = (
            self.session.query(EventModel)
            .filter(EventModel.is_active.is_(True))
            .filter(
                or_(
                    func.lower(EventModel.name).like(pattern),
                    func.lower(EventModel.description).like(pattern),
                    func.lower(EventModel.location).like(pattern),
                )
            )
            .order_by(EventModel.date.asc(), EventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, event: Event) -> Event:
        model = EventModel()
        self._apply_entity_to_model(model, event, include_creation_fields=True)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event, include_creation_fields=False)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, event_id: int) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            msg = f"Event with id {event_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    @staticmethod
    def _apply_entity_to_model(
        model: EventModel, event: Event, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.creator_id = event.creator_id
            if event.created_at is not None:
                model.created_at = ensure_app_naive_datetime(event.created_at)
        model.name = event.name
        model.description = event.description
        model.date = event.date
        model.time_start = event.time_start
        model.time_end = event.time_end
        model.location = event.location
        model.coordinates = event.coordinates
        model.cover_image = event.cover_image
        model.category_id = event.category_id
        model.subcategory_id = event.subcategory_id
        model.event_type = event.event_type
        model.capacity = event.capacity
        model.ticket_price = event.ticket_price
        model.important_info = event.important_info
        model.is_active = event.is_active

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            name=model.name,
            description=model.description,
            date=model.date,
            time_start=model.time_start,
            time_end=model.time_end,
            location=model.location,
            coordinates=model.coordinates,
            cover_image=model.cover_image,
            category_id=model.category_id,
            subcategory_id=model.subcategory_id,
            creator_id=model.creator_id,
            event_type=model.event_type,
            capacity=model.capacity,
            ticket_price=model.ticket_price,
            important_info=model.important_info,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["EventRepository"]
