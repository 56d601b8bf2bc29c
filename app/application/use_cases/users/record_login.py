"""Use case for registering the last login of a user."""

from sqlalchemy.orm import Session

from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone


def record_login(session: Session, user_id: int) -> None:
    """Persist the last login timestamp for the given user."""

    with UnitOfWork(session) as uow:
        user = uow.users.get(user_id)
        if not user:
            return

        user.last_login = now_in_app_timezone()
        uow.users.update(user)
        uow.commit()
