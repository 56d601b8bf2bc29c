"""Coordinate repository writes inside a single database transaction."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import InternalError
from app.infrastructure.repositories import (
    CategoryRepository,
    ChatMessageRepository,
    CoOrganizerRepository,
    EventRepository,
    NotificationRepository,
    ParticipationRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Share one session across repositories and commit their changes together.

    Repositories only flush. Nothing is persisted until :meth:`commit` runs,
    and leaving the context manager with an exception rolls everything back.
    Callbacks registered with :meth:`after_commit` run once the transaction is
    durable, which keeps websocket pushes from announcing rolled back rows.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.categories = CategoryRepository(session)
        self.events = EventRepository(session)
        self.participations = ParticipationRepository(session)
        self.notifications = NotificationRepository(session)
        self.chat_messages = ChatMessageRepository(session)
        self.co_organizers = CoOrganizerRepository(session)
        self._after_commit: list[Callable[[], None]] = []
        self._committed = False

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None or not self._committed:
            self.rollback()

    def after_commit(self, callback: Callable[[], None]) -> None:
        self._after_commit.append(callback)

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Error during commit, rolling back")
            self.rollback()
            raise InternalError("Não foi possível salvar as alterações") from exc
        self._committed = True

        callbacks, self._after_commit = self._after_commit, []
        for callback in callbacks:
            try:
                callback()
            except Exception:  # pragma: no cover - delivery must not undo a commit
                logger.exception("After-commit callback failed")

    def rollback(self) -> None:
        self._after_commit = []
        self.session.rollback()


__all__ = ["UnitOfWork"]
