"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, text
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = self.session.query(UserModel).filter_by(username=username).first()
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_map_by_ids(self, user_ids: Sequence[int]) -> dict[int, User]:
        if not user_ids:
            return {}

        unique_ids = {int(user_id) for user_id in user_ids}
        query = self.session.query(UserModel).filter(UserModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    def create(self, user: User) -> User:
        model = UserModel()
        if user.id is not None:
            model.id = user.id
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.flush()
        if user.id is not None:
            self._sync_id_sequence()
        self.session.refresh(model)
        return self._to_entity(model)

    def _sync_id_sequence(self) -> None:
        # Explicit ids do not advance PostgreSQL sequences.
        if self.session.get_bind().dialect.name != "postgresql":
            return
        self.session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('users', 'id'), "
                "(SELECT MAX(id) FROM users))"
            )
        )

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields and user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        model.username = user.username
        model.password = user.password
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email
        model.phone = user.phone
        model.birth_date = user.birth_date
        model.city = user.city
        model.state = user.state
        model.biography = user.biography
        model.profile_image = user.profile_image
        model.is_active = user.is_active
        model.is_admin = user.is_admin
        model.email_verified = user.email_verified
        model.phone_verified = user.phone_verified
        model.document_verified = user.document_verified
        model.last_login = ensure_app_naive_datetime(user.last_login)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password=model.password,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            birth_date=model.birth_date,
            city=model.city,
            state=model.state,
            biography=model.biography,
            profile_image=model.profile_image,
            is_active=model.is_active,
            is_admin=model.is_admin,
            email_verified=model.email_verified,
            phone_verified=model.phone_verified,
            document_verified=model.document_verified,
            last_login=ensure_app_timezone(model.last_login),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
