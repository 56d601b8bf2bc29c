"""Participation lifecycle use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.co_organizers import accept_invite, invite_co_organizer
from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.participation import (
    approve_participation,
    cancel_participation,
    get_participation,
    reject_participation,
    remove_participation,
    request_participation,
    revert_participation,
)
from app.domain.entities import (
    EVENT_TYPE_PRIVATE_TICKET,
    EVENT_TYPE_PUBLIC,
    NOTIFICATION_PARTICIPANT_REQUEST,
    NOTIFICATION_PARTICIPATION_APPROVED,
    NOTIFICATION_PARTICIPATION_REJECTED,
)
from app.domain.errors import ConflictError, ForbiddenError, NotFoundError
from app.infrastructure.repositories import ParticipationRepository


def _types(session, user_id: int) -> list[str]:
    return [item.notification.type for item in list_notifications(session, user_id=user_id)]


def test_application_event_starts_pending_and_notifies_creator(session, make_user, make_event):
    creator = make_user("Carla", "Lima")
    guest = make_user("João", "Silva")
    event = make_event(creator, name="Jantar Secreto")

    participation = request_participation(
        session, event_id=event.id, user_id=guest.id, application_reason="Adoro jantares"
    )

    assert participation.status == "pending"
    assert participation.application_reason == "Adoro jantares"
    [delivery] = list_notifications(session, user_id=creator.id)
    assert delivery.notification.type == NOTIFICATION_PARTICIPANT_REQUEST
    assert delivery.notification.title == "Nova solicitação para seu evento"
    assert delivery.notification.message == 'João Silva quer experienciar o seu evento "Jantar Secreto"'
    assert delivery.notification.event_id == event.id
    assert delivery.notification.source_id == participation.id
    assert delivery.recipient.read is False
    assert list_notifications(session, user_id=guest.id) == []


@pytest.mark.parametrize("event_type", [EVENT_TYPE_PUBLIC, EVENT_TYPE_PRIVATE_TICKET])
def test_open_events_confirm_without_notification(session, make_user, make_event, event_type):
    creator = make_user()
    guest = make_user()
    event = make_event(creator, event_type=event_type)

    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    assert participation.status == "confirmed"
    assert list_notifications(session, user_id=creator.id) == []


def test_request_for_missing_event_is_not_found(session, make_user):
    guest = make_user()

    with pytest.raises(NotFoundError):
        request_participation(session, event_id=999, user_id=guest.id)


def test_creator_cannot_join_own_event(session, make_user, make_event):
    creator = make_user()
    event = make_event(creator)

    with pytest.raises(ConflictError):
        request_participation(session, event_id=event.id, user_id=creator.id)


def test_second_request_conflicts_and_keeps_single_row(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    request_participation(session, event_id=event.id, user_id=guest.id)

    with pytest.raises(ConflictError):
        request_participation(session, event_id=event.id, user_id=guest.id)

    assert len(ParticipationRepository(session).list_for_event(event.id)) == 1
    assert _types(session, creator.id) == [NOTIFICATION_PARTICIPANT_REQUEST]


def test_approve_sets_review_metadata_and_notifies(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator, name="Sarau")
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    approved = approve_participation(
        session, participation_id=participation.id, actor_id=creator.id
    )

    assert approved.status == "approved"
    assert approved.reviewed_by == creator.id
    assert approved.reviewed_at is not None
    [delivery] = list_notifications(session, user_id=guest.id)
    assert delivery.notification.type == NOTIFICATION_PARTICIPATION_APPROVED
    assert delivery.notification.title == "Solicitação aprovada"
    assert delivery.notification.message == (
        'Sua solicitação para experienciar o evento "Sarau" foi aprovada!'
    )


def test_reject_notifies_participant(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator, name="Sarau")
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    rejected = reject_participation(
        session, participation_id=participation.id, actor_id=creator.id
    )

    assert rejected.status == "rejected"
    [delivery] = list_notifications(session, user_id=guest.id)
    assert delivery.notification.type == NOTIFICATION_PARTICIPATION_REJECTED
    assert delivery.notification.title == "Solicitação não aprovada"
    assert delivery.notification.message.endswith("não foi aprovada.")


def test_strict_mode_rejects_second_approval(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)
    approve_participation(session, participation_id=participation.id, actor_id=creator.id)

    with pytest.raises(ConflictError):
        approve_participation(session, participation_id=participation.id, actor_id=creator.id)
    with pytest.raises(ConflictError):
        reject_participation(session, participation_id=participation.id, actor_id=creator.id)

    assert _types(session, guest.id) == [NOTIFICATION_PARTICIPATION_APPROVED]
    assert ParticipationRepository(session).get(participation.id).status == "approved"


def test_strict_mode_rejects_reverting_pending_or_confirmed(session, make_user, make_event):
    creator = make_user()
    applicant = make_user()
    attendee = make_user()
    application_event = make_event(creator)
    public_event = make_event(creator, event_type=EVENT_TYPE_PUBLIC)
    pending = request_participation(session, event_id=application_event.id, user_id=applicant.id)
    confirmed = request_participation(session, event_id=public_event.id, user_id=attendee.id)

    with pytest.raises(ConflictError):
        revert_participation(session, participation_id=pending.id, actor_id=creator.id)
    with pytest.raises(ConflictError):
        revert_participation(session, participation_id=confirmed.id, actor_id=creator.id)


def test_lenient_mode_reapproves_without_second_notification(
    session, make_user, make_event, lenient_transitions
):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    approve_participation(session, participation_id=participation.id, actor_id=creator.id)
    again = approve_participation(session, participation_id=participation.id, actor_id=creator.id)

    assert again.status == "approved"
    assert _types(session, guest.id) == [NOTIFICATION_PARTICIPATION_APPROVED]


def test_lenient_mode_double_reject_sends_one_notification(
    session, make_user, make_event, lenient_transitions
):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    reject_participation(session, participation_id=participation.id, actor_id=creator.id)
    reject_participation(session, participation_id=participation.id, actor_id=creator.id)

    assert _types(session, guest.id) == [NOTIFICATION_PARTICIPATION_REJECTED]


def test_revert_returns_to_pending_silently(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)
    approve_participation(session, participation_id=participation.id, actor_id=creator.id)

    reverted = revert_participation(
        session, participation_id=participation.id, actor_id=creator.id
    )

    assert reverted.status == "pending"
    assert reverted.reviewed_by is None
    assert reverted.reviewed_at is None
    assert _types(session, guest.id) == [NOTIFICATION_PARTICIPATION_APPROVED]


def test_only_managers_review_participations(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    stranger = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    for operation in (approve_participation, reject_participation, revert_participation):
        with pytest.raises(ForbiddenError):
            operation(session, participation_id=participation.id, actor_id=stranger.id)
    with pytest.raises(ForbiddenError):
        approve_participation(session, participation_id=participation.id, actor_id=guest.id)

    assert ParticipationRepository(session).get(participation.id).status == "pending"
    assert list_notifications(session, user_id=guest.id) == []


def test_co_organizer_can_approve(session, make_user, make_event):
    creator = make_user()
    helper = make_user(email="helper@example.com")
    guest = make_user()
    event = make_event(creator)
    invite = invite_co_organizer(
        session, event_id=event.id, actor_id=creator.id, email="helper@example.com"
    )
    accept_invite(session, token=invite.token, user_id=helper.id)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)

    approved = approve_participation(
        session, participation_id=participation.id, actor_id=helper.id
    )

    assert approved.status == "approved"
    assert approved.reviewed_by == helper.id


def test_review_of_missing_participation_is_not_found(session, make_user):
    creator = make_user()

    with pytest.raises(NotFoundError):
        approve_participation(session, participation_id=404, actor_id=creator.id)


def test_remove_by_self_or_manager_only(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    other_guest = make_user()
    stranger = make_user()
    event = make_event(creator)
    mine = request_participation(session, event_id=event.id, user_id=guest.id)
    theirs = request_participation(session, event_id=event.id, user_id=other_guest.id)

    with pytest.raises(ForbiddenError):
        remove_participation(session, participation_id=mine.id, actor_id=stranger.id)

    remove_participation(session, participation_id=mine.id, actor_id=guest.id)
    remove_participation(session, participation_id=theirs.id, actor_id=creator.id)

    assert ParticipationRepository(session).list_for_event(event.id) == []


def test_cancel_allows_requesting_again(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    request_participation(session, event_id=event.id, user_id=guest.id)

    cancel_participation(session, event_id=event.id, user_id=guest.id)
    assert get_participation(session, event_id=event.id, user_id=guest.id) is None

    again = request_participation(session, event_id=event.id, user_id=guest.id)
    assert again.status == "pending"


def test_cancel_without_participation_is_not_found(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)

    with pytest.raises(NotFoundError):
        cancel_participation(session, event_id=event.id, user_id=guest.id)
