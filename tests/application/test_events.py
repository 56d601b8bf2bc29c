"""Event use cases, including the deletion cascade."""

from __future__ import annotations

from datetime import date

import pytest

from app.application.use_cases.chat import send_chat_message
from app.application.use_cases.co_organizers import accept_invite, invite_co_organizer
from app.application.use_cases.events import (
    create_event,
    delete_event,
    get_event,
    list_created_events,
    list_events,
    list_participating_events,
    search_events,
    share_event,
    update_event,
)
from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.participation import request_participation
from app.domain.entities import EVENT_TYPE_PUBLIC, NOTIFICATION_EVENT_CANCELED
from app.domain.errors import ForbiddenError, NotFoundError, ValidationError
from app.infrastructure.models import (
    ChatMessageModel,
    EventCoOrganizerInviteModel,
    EventCoOrganizerModel,
    EventParticipantModel,
)
from app.infrastructure.repositories import CategoryRepository


def test_create_event_validates_category_and_type(session, make_user):
    creator = make_user()
    party = CategoryRepository(session).get_by_slug("party")
    concert = CategoryRepository(session).get_by_slug("concert")
    rock = next(
        item
        for item in CategoryRepository(session).list_subcategories(category_id=concert.id)
        if item.slug == "rock"
    )
    base = {
        "creator_id": creator.id,
        "name": "Show",
        "description": "Música ao vivo",
        "date": date(2030, 1, 1),
        "time_start": "21:00",
        "location": "Centro",
    }

    event = create_event(session, category_id=concert.id, subcategory_id=rock.id, **base)
    assert event.id is not None
    assert event.event_type == EVENT_TYPE_PUBLIC

    with pytest.raises(NotFoundError):
        create_event(session, category_id=9999, **base)
    with pytest.raises(ValidationError):
        create_event(session, category_id=party.id, subcategory_id=rock.id, **base)
    with pytest.raises(ValidationError):
        create_event(session, category_id=party.id, event_type="secret", **base)
    with pytest.raises(ValidationError):
        create_event(session, category_id=party.id, **{**base, "time_start": "25:00"})


def test_search_is_case_insensitive_over_text_fields(session, make_user, make_event):
    creator = make_user()
    make_event(creator, name="Samba no Parque", description="Roda", location="Ibirapuera")
    make_event(creator, name="Churrasco", description="Com SAMBA ao vivo", location="Quintal")
    make_event(creator, name="Leitura", description="Clube do livro", location="Vila Samba")
    make_event(creator, name="Yoga", description="Manhã tranquila", location="Praia")

    names = {event.name for event in search_events(session, query="samba")}

    assert names == {"Samba no Parque", "Churrasco", "Leitura"}
    assert search_events(session, query="   ") == []


def test_list_events_filters_by_known_category(session, make_user, make_event):
    creator = make_user()
    concert = CategoryRepository(session).get_by_slug("concert")
    make_event(creator, name="Festa")
    make_event(creator, name="Show", category_id=concert.id)

    assert [e.name for e in list_events(session, category_slug="concert")] == ["Show"]
    assert len(list_events(session, category_slug="unknown")) == 2
    assert len(list_events(session)) == 2


def test_update_event_by_manager_only(session, make_user, make_event):
    creator = make_user()
    helper = make_user(email="helper@example.com")
    stranger = make_user()
    event = make_event(creator)
    invite = invite_co_organizer(
        session, event_id=event.id, actor_id=creator.id, email="helper@example.com"
    )
    accept_invite(session, token=invite.token, user_id=helper.id)

    updated = update_event(
        session, event_id=event.id, actor_id=helper.id, changes={"name": "Nova Festa"}
    )
    assert updated.name == "Nova Festa"

    with pytest.raises(ForbiddenError):
        update_event(session, event_id=event.id, actor_id=stranger.id, changes={"name": "x"})
    with pytest.raises(ValidationError):
        update_event(session, event_id=event.id, actor_id=creator.id, changes={"creator_id": 9})


@pytest.mark.parametrize("field", ["name", "date", "category_id", "is_active", "time_start"])
def test_update_event_rejects_clearing_required_fields(session, make_user, make_event, field):
    creator = make_user()
    event = make_event(creator)

    with pytest.raises(ValidationError, match=field):
        update_event(session, event_id=event.id, actor_id=creator.id, changes={field: None})

    assert get_event(session, event_id=event.id).event.name == "Festa na Laje"


def test_delete_event_cascades_and_notifies_participants(session, make_user, make_event):
    creator = make_user()
    applicant = make_user()
    attendee = make_user()
    helper = make_user(email="helper@example.com")
    event = make_event(creator, name="Luau")
    request_participation(session, event_id=event.id, user_id=applicant.id)
    request_participation(session, event_id=event.id, user_id=attendee.id)
    send_chat_message(session, event_id=event.id, user_id=creator.id, content="bem-vindos")
    invite = invite_co_organizer(
        session, event_id=event.id, actor_id=creator.id, email="helper@example.com"
    )
    accept_invite(session, token=invite.token, user_id=helper.id)

    delete_event(session, event_id=event.id, actor_id=creator.id)

    with pytest.raises(NotFoundError):
        get_event(session, event_id=event.id)
    for model in (
        EventParticipantModel,
        ChatMessageModel,
        EventCoOrganizerModel,
        EventCoOrganizerInviteModel,
    ):
        assert session.query(model).filter_by(event_id=event.id).count() == 0
    for user in (applicant, attendee):
        [delivery] = list_notifications(session, user_id=user.id)
        assert delivery.notification.type == NOTIFICATION_EVENT_CANCELED
        assert delivery.notification.message == 'O evento "Luau" foi cancelado pelo organizador.'


def test_only_creator_deletes_event(session, make_user, make_event):
    creator = make_user()
    helper = make_user(email="helper@example.com")
    event = make_event(creator)
    invite = invite_co_organizer(
        session, event_id=event.id, actor_id=creator.id, email="helper@example.com"
    )
    accept_invite(session, token=invite.token, user_id=helper.id)

    with pytest.raises(ForbiddenError):
        delete_event(session, event_id=event.id, actor_id=helper.id)

    assert get_event(session, event_id=event.id).event.id == event.id


def test_user_event_lists(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    mine = make_event(creator, name="Minha")
    other = make_event(guest, name="Outra")
    request_participation(session, event_id=other.id, user_id=creator.id)

    [created] = list_created_events(session, user_id=creator.id)
    assert created.event.id == mine.id
    assert created.category.slug == "party"
    assert created.participants == []
    assert [e.id for e in list_participating_events(session, user_id=creator.id)] == [other.id]


def test_get_event_includes_participants_with_users(session, make_user, make_event):
    creator = make_user("Carla", "Lima")
    guest = make_user("João", "Silva")
    event = make_event(creator)
    request_participation(session, event_id=event.id, user_id=guest.id)

    details = get_event(session, event_id=event.id)

    assert details.creator.full_name == "Carla Lima"
    assert details.category.slug == "party"
    assert [(p.user.full_name, p.participation.status) for p in details.participants] == [
        ("João Silva", "pending")
    ]


def test_share_event_summarizes_the_event(session, make_user, make_event):
    creator = make_user("Carla", "Lima")
    event = make_event(creator, time_end="23:00", cover_image="capa.png")

    shared = share_event(session, event_id=event.id)

    assert shared.link == f"http://localhost:5000/eventos/{event.id}"
    assert shared.title == "Festa na Laje - Baco Experiências"
    assert shared.description == "Uma festa com amigos"
    assert shared.image == "capa.png"
    assert shared.event.date == "17/05/2030"
    assert shared.event.time == "20:00 - 23:00"
    assert shared.event.creator == "Carla Lima"

    with pytest.raises(NotFoundError):
        share_event(session, event_id=999)
