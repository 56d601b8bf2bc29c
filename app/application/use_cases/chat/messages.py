"""Use cases for reading and posting chat messages."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ChatMessage
from app.domain.errors import ValidationError
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

from .gate import check_chat_access

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


def list_chat_messages(
    session: Session, *, event_id: int, user_id: int
) -> Sequence[ChatMessage]:
    uow = UnitOfWork(session)
    access = check_chat_access(uow, event_id=event_id, user_id=user_id)
    return uow.chat_messages.list_for_event(event_id, since=access.visible_since)


def send_chat_message(
    session: Session, *, event_id: int, user_id: int, content: str
) -> ChatMessage:
    text = (content or "").strip()
    if not text:
        raise ValidationError("A mensagem não pode estar vazia")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            f"A mensagem deve ter no máximo {MAX_MESSAGE_LENGTH} caracteres"
        )

    with UnitOfWork(session) as uow:
        check_chat_access(uow, event_id=event_id, user_id=user_id)
        message = uow.chat_messages.create(
            ChatMessage(
                id=None,
                event_id=event_id,
                sender_id=user_id,
                content=text,
                sent_at=now_in_app_timezone(),
            )
        )
        uow.commit()

    logger.debug("User %s posted message %s in event %s", user_id, message.id, event_id)
    return message
