"""Shared fixtures: an in-memory database rebuilt for every test."""

from __future__ import annotations

import itertools
import os
from datetime import date

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["STRICT_PARTICIPATION_TRANSITIONS"] = "true"
for _name in ("SENDGRID_API_KEY", "SENDGRID_SENDER"):
    os.environ.pop(_name, None)

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import EVENT_TYPE_PRIVATE_APPLICATION, Event, User  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import (  # noqa: E402
    CategoryRepository,
    EventRepository,
    UserRepository,
)
from app.infrastructure.security import (  # noqa: E402
    create_user_access_token,
    get_password_hash,
)

PASSWORD = "segredo123"
PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from an empty schema with the seeded categories."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def password() -> str:
    """Plain text password of every user built by ``make_user``."""

    return PASSWORD


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def lenient_transitions(monkeypatch: pytest.MonkeyPatch):
    """Accept approve/reject/revert from any status."""

    monkeypatch.setenv("STRICT_PARTICIPATION_TRANSITIONS", "false")
    reset_settings_cache()
    yield
    monkeypatch.undo()
    reset_settings_cache()


@pytest.fixture()
def make_user(session):
    counter = itertools.count(1)

    def _make(first_name: str = "Ana", last_name: str = "Souza", **overrides) -> User:
        number = next(counter)
        values = {
            "username": f"{number:011d}",
            "email": f"user{number}@example.com",
            "password": PASSWORD_HASH,
            "first_name": first_name,
            "last_name": last_name,
        }
        values.update(overrides)
        user = UserRepository(session).create(User(id=None, **values))
        session.commit()
        return user

    return _make


@pytest.fixture()
def make_event(session):
    def _make(creator: User, **overrides) -> Event:
        category = CategoryRepository(session).get_by_slug("party")
        values = {
            "id": None,
            "name": "Festa na Laje",
            "description": "Uma festa com amigos",
            "date": date(2030, 5, 17),
            "time_start": "20:00",
            "time_end": None,
            "location": "Rua das Flores, 10, São Paulo",
            "coordinates": None,
            "cover_image": None,
            "category_id": category.id,
            "subcategory_id": None,
            "creator_id": creator.id,
            "event_type": EVENT_TYPE_PRIVATE_APPLICATION,
            "capacity": None,
            "ticket_price": None,
            "important_info": None,
            "is_active": True,
            "created_at": None,
        }
        values.update(overrides)
        event = EventRepository(session).create(Event(**values))
        session.commit()
        return event

    return _make


@pytest.fixture()
def auth_headers():
    def _headers(user: User) -> dict[str, str]:
        token = create_user_access_token(user.id, user.password, user.is_active)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
