"""Use case for changing the password of the authenticated user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.security import get_password_hash, verify_password
from app.infrastructure.unit_of_work import UnitOfWork

from .validators import ensure_valid_password


def change_password(
    session: Session, *, user_id: int, current_password: str, new_password: str
) -> User:
    """Replace the password after checking the current one.

    Tokens embed a signature of the stored hash, so every token issued before
    the change stops being accepted.
    """

    ensure_valid_password(new_password)

    with UnitOfWork(session) as uow:
        user = uow.users.get(user_id)
        if user is None:
            raise NotFoundError("Usuário não encontrado")
        if not verify_password(current_password, user.password):
            raise ValidationError("Senha atual incorreta")

        user.password = get_password_hash(new_password)
        user = uow.users.update(user)
        uow.commit()
    return user
