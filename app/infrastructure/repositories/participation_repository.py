"""Persistence layer for event participations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import EventParticipant
from app.domain.errors import ConflictError
from app.infrastructure.models import EventParticipantModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class ParticipationRepository:
    """Provide CRUD operations for :class:`EventParticipant` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, participation_id: int) -> EventParticipant | None:
        model = self.session.get(EventParticipantModel, participation_id)
        return self._to_entity(model) if model else None

    def get_for_user(self, *, event_id: int, user_id: int) -> EventParticipant | None:
        model = (
            self.session.query(EventParticipantModel)
            .filter_by(event_id=event_id, user_id=user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_event(self, event_id: int) -> Sequence[EventParticipant]:
        query = (
            self.session.query(EventParticipantModel)
            .filter(EventParticipantModel.event_id == event_id)
            .order_by(EventParticipantModel.created_at.asc(), EventParticipantModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(self, user_id: int) -> Sequence[EventParticipant]:
        query = (
            self.session.query(EventParticipantModel)
            .filter(EventParticipantModel.user_id == user_id)
            .order_by(EventParticipantModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, participation: EventParticipant) -> EventParticipant:
        """Insert ``participation`` relying on the (event, user) unique constraint."""

        model = EventParticipantModel()
        self._apply_entity_to_model(model, participation)
        if participation.created_at is not None:
            model.created_at = ensure_app_naive_datetime(participation.created_at)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("Você já está participando deste evento") from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, participation: EventParticipant) -> EventParticipant:
        model = self.session.get(EventParticipantModel, participation.id)
        if model is None:
            msg = f"Participation with id {participation.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, participation)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, participation_id: int) -> None:
        model = self.session.get(EventParticipantModel, participation_id)
        if model is None:
            msg = f"Participation with id {participation_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def delete_for_event(self, event_id: int) -> int:
        deleted = (
            self.session.query(EventParticipantModel)
            .filter(EventParticipantModel.event_id == event_id)
            .delete(synchronize_session=False)
        )
        self.session.flush()
        return deleted

    @staticmethod
    def _apply_entity_to_model(
        model: EventParticipantModel, participation: EventParticipant
    ) -> None:
        model.event_id = participation.event_id
        model.user_id = participation.user_id
        model.status = participation.status
        model.application_reason = participation.application_reason
        model.reviewed_by = participation.reviewed_by
        model.reviewed_at = ensure_app_naive_datetime(participation.reviewed_at)

    @staticmethod
    def _to_entity(model: EventParticipantModel) -> EventParticipant:
        return EventParticipant(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            status=model.status,
            application_reason=model.application_reason,
            reviewed_by=model.reviewed_by,
            reviewed_at=ensure_app_timezone(model.reviewed_at),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ParticipationRepository"]
