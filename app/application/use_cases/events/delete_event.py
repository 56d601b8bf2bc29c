"""Use case for deleting an event and everything attached to it."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_event_canceled
from app.infrastructure.unit_of_work import UnitOfWork

from .permissions import ensure_event_creator, load_event

logger = logging.getLogger(__name__)


def delete_event(session: Session, *, event_id: int, actor_id: int) -> None:
    """Remove the event, its participations, chat and co-organizers atomically.

    Former participants receive one ``event_canceled`` notification, written in
    the same transaction as the deletion.
    """

    with UnitOfWork(session) as uow:
        event = load_event(uow, event_id)
        ensure_event_creator(event, actor_id)

        participant_ids = [
            participation.user_id
            for participation in uow.participations.list_for_event(event_id)
        ]
        uow.participations.delete_for_event(event_id)
        uow.chat_messages.delete_for_event(event_id)
        uow.co_organizers.delete_for_event(event_id)
        uow.events.delete(event_id)

        notify_event_canceled(uow, event=event, participant_ids=participant_ids)
        uow.commit()

    logger.info(
        "Event %s deleted by %s; %s participant(s) notified",
        event_id,
        actor_id,
        len(participant_ids),
    )
