from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.domain.entities import User
from app.domain.errors import InternalError
from app.infrastructure.unit_of_work import UnitOfWork


def _user() -> User:
    return User(
        id=None,
        username="12345678901",
        email="falha@example.com",
        password="hash",
        first_name="Ana",
        last_name="Souza",
    )


def test_failed_commit_rolls_back_and_raises_internal_error(session, monkeypatch):
    delivered: list[str] = []

    def broken_commit() -> None:
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    with UnitOfWork(session) as uow:
        uow.users.create(_user())
        uow.after_commit(lambda: delivered.append("push"))
        monkeypatch.setattr(session, "commit", broken_commit)
        with pytest.raises(InternalError) as exc_info:
            uow.commit()

    assert exc_info.value.status_code == 500
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert delivered == []
    monkeypatch.undo()
    assert UnitOfWork(session).users.get_by_email("falha@example.com") is None


def test_commit_runs_callbacks_once(session):
    delivered: list[str] = []

    with UnitOfWork(session) as uow:
        uow.users.create(_user())
        uow.after_commit(lambda: delivered.append("push"))
        uow.commit()

    assert delivered == ["push"]
    assert UnitOfWork(session).users.get_by_email("falha@example.com") is not None
