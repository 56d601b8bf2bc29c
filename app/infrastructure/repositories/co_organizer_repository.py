"""Persistence helpers for co-organizer invitations and memberships."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import EventCoOrganizer, EventCoOrganizerInvite
from app.infrastructure.models import EventCoOrganizerInviteModel, EventCoOrganizerModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class CoOrganizerRepository:
    """Provide CRUD operations for invites and co-organizer associations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # Invites

    def get_invite(self, invite_id: int) -> EventCoOrganizerInvite | None:
        model = self.session.get(EventCoOrganizerInviteModel, invite_id)
        return self._invite_to_entity(model) if model else None

    def get_invite_by_token(self, token: str) -> EventCoOrganizerInvite | None:
        model = (
            self.session.query(EventCoOrganizerInviteModel).filter_by(token=token).first()
        )
        return self._invite_to_entity(model) if model else None

    def get_pending_invite_by_email(
        self, *, event_id: int, email: str
    ) -> EventCoOrganizerInvite | None:
        model = (
            self.session.query(EventCoOrganizerInviteModel)
            .filter_by(event_id=event_id, email=email, status="pending")
            .first()
        )
        return self._invite_to_entity(model) if model else None

    def list_invites(self, event_id: int) -> Sequence[EventCoOrganizerInvite]:
        query = (
            self.session.query(EventCoOrganizerInviteModel)
            .filter(EventCoOrganizerInviteModel.event_id == event_id)
            .order_by(
                EventCoOrganizerInviteModel.invited_at.desc(),
                EventCoOrganizerInviteModel.id.desc(),
            )
        )
        return [self._invite_to_entity(model) for model in query.all()]

    def create_invite(self, invite: EventCoOrganizerInvite) -> EventCoOrganizerInvite:
        model = EventCoOrganizerInviteModel()
        self._apply_invite_to_model(model, invite)
        if invite.invited_at is not None:
            model.invited_at = ensure_app_naive_datetime(invite.invited_at)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._invite_to_entity(model)

    def update_invite(self, invite: EventCoOrganizerInvite) -> EventCoOrganizerInvite:
        model = self.session.get(EventCoOrganizerInviteModel, invite.id)
        if model is None:
            msg = f"Invite with id {invite.id} not found"
            raise ValueError(msg)
        self._apply_invite_to_model(model, invite)
        if invite.invited_at is not None:
            model.invited_at = ensure_app_naive_datetime(invite.invited_at)
        self.session.add(model)
        self.session.flush()
        return self._invite_to_entity(model)

    def delete_invite(self, invite_id: int) -> None:
        model = self.session.get(EventCoOrganizerInviteModel, invite_id)
        if model is None:
            msg = f"Invite with id {invite_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    # Memberships

    def is_co_organizer(self, *, event_id: int, user_id: int) -> bool:
        return self.session.get(EventCoOrganizerModel, (event_id, user_id)) is not None

    def list_co_organizers(self, event_id: int) -> Sequence[EventCoOrganizer]:
        query = (
            self.session.query(EventCoOrganizerModel)
            .filter(EventCoOrganizerModel.event_id == event_id)
            .order_by(EventCoOrganizerModel.added_at.asc())
        )
        return [self._co_organizer_to_entity(model) for model in query.all()]

    def add_co_organizer(self, *, event_id: int, user_id: int) -> EventCoOrganizer:
        model = self.session.get(EventCoOrganizerModel, (event_id, user_id))
        if model is None:
            model = EventCoOrganizerModel(event_id=event_id, user_id=user_id)
            self.session.add(model)
            self.session.flush()
            self.session.refresh(model)
        return self._co_organizer_to_entity(model)

    def remove_co_organizer(self, *, event_id: int, user_id: int) -> bool:
        model = self.session.get(EventCoOrganizerModel, (event_id, user_id))
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def delete_for_event(self, event_id: int) -> None:
        self.session.query(EventCoOrganizerModel).filter(
            EventCoOrganizerModel.event_id == event_id
        ).delete(synchronize_session=False)
        self.session.query(EventCoOrganizerInviteModel).filter(
            EventCoOrganizerInviteModel.event_id == event_id
        ).delete(synchronize_session=False)
        self.session.flush()

    @staticmethod
    def _apply_invite_to_model(
        model: EventCoOrganizerInviteModel, invite: EventCoOrganizerInvite
    ) -> None:
        model.event_id = invite.event_id
        model.inviter_id = invite.inviter_id
        model.email = invite.email
        model.token = invite.token
        model.status = invite.status
        model.message = invite.message
        model.invitee_id = invite.invitee_id
        model.responded_at = ensure_app_naive_datetime(invite.responded_at)

    @staticmethod
    def _invite_to_entity(model: EventCoOrganizerInviteModel) -> EventCoOrganizerInvite:
        return EventCoOrganizerInvite(
            id=model.id,
            event_id=model.event_id,
            inviter_id=model.inviter_id,
            email=model.email,
            token=model.token,
            status=model.status,
            message=model.message,
            invitee_id=model.invitee_id,
            invited_at=ensure_app_timezone(model.invited_at),
            responded_at=ensure_app_timezone(model.responded_at),
        )

    @staticmethod
    def _co_organizer_to_entity(model: EventCoOrganizerModel) -> EventCoOrganizer:
        return EventCoOrganizer(
            event_id=model.event_id,
            user_id=model.user_id,
            added_at=ensure_app_timezone(model.added_at),
        )


__all__ = ["CoOrganizerRepository"]
