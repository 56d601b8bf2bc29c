"""Use case for registering new users."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.errors import ConflictError
from app.infrastructure.security import get_password_hash
from app.infrastructure.unit_of_work import UnitOfWork
from app.utils import now_in_app_timezone

from .validators import ensure_valid_password, normalize_email, normalize_username

logger = logging.getLogger(__name__)


def register_user(
    session: Session,
    *,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    phone: str | None = None,
    birth_date: date | None = None,
    city: str | None = None,
    state: str | None = None,
) -> User:
    """Create a user account ensuring the CPF and email are unused."""

    username = normalize_username(username)
    email = normalize_email(email)
    ensure_valid_password(password)

    with UnitOfWork(session) as uow:
        if uow.users.get_by_username(username):
            raise ConflictError("CPF já cadastrado")
        if uow.users.get_by_email(email):
            raise ConflictError("E-mail já cadastrado")

        user = uow.users.create(
            User(
                id=None,
                username=username,
                password=get_password_hash(password),
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                email=email,
                phone=phone,
                birth_date=birth_date,
                city=city,
                state=state,
                created_at=now_in_app_timezone(),
            )
        )
        uow.commit()

    logger.info("Registered user %s", user.id)
    return user


ADMIN_USER_ID = 1


def create_admin_user(
    session: Session,
    *,
    username: str,
    password: str,
    email: str,
    first_name: str = "Administrador",
    last_name: str = "Baco",
) -> User:
    """Create the reserved administrator account with id ``1``."""

    username = normalize_username(username)
    email = normalize_email(email)
    ensure_valid_password(password)

    with UnitOfWork(session) as uow:
        if uow.users.get(ADMIN_USER_ID) is not None:
            raise ConflictError("O administrador já foi criado")
        if uow.users.get_by_username(username) or uow.users.get_by_email(email):
            raise ConflictError("CPF ou e-mail já cadastrado")

        user = uow.users.create(
            User(
                id=ADMIN_USER_ID,
                username=username,
                password=get_password_hash(password),
                first_name=first_name,
                last_name=last_name,
                email=email,
                is_admin=True,
                email_verified=True,
                created_at=now_in_app_timezone(),
            )
        )
        uow.commit()

    logger.info("Created administrator account")
    return user
