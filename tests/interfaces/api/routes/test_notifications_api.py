from __future__ import annotations

import pytest
from starlette.websockets import WebSocketDisconnect

from app.application.use_cases.participation import request_participation
from app.infrastructure.security import create_user_access_token


def _pending_request(session, make_user, make_event):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = request_participation(session, event_id=event.id, user_id=guest.id)
    return creator, guest, participation


def test_mark_read_mark_all_and_delete(client, session, make_user, make_event, auth_headers):
    creator = make_user()
    event_a = make_event(creator, name="A")
    event_b = make_event(creator, name="B")
    for event in (event_a, event_b):
        request_participation(session, event_id=event.id, user_id=make_user().id)
    headers = auth_headers(creator)

    items = client.get("/api/notifications", headers=headers).json()
    assert len(items) == 2
    first_id = items[0]["recipient"]["id"]

    read = client.patch(f"/api/notifications/{first_id}/read", headers=headers)
    assert read.status_code == 200
    assert read.json()["recipient"]["read"] is True

    unread = client.get("/api/notifications/unread-count", headers=headers)
    assert unread.status_code == 200
    assert unread.json() == {"count": 1}

    read_all = client.patch("/api/notifications/all/read", headers=headers)
    assert read_all.status_code == 200
    assert read_all.json() == {"updated": 1}
    assert client.get("/api/notifications/unread-count", headers=headers).json() == {"count": 0}

    assert client.delete(f"/api/notifications/{first_id}", headers=headers).status_code == 204
    remaining = client.get("/api/notifications", headers=headers).json()
    assert [item["recipient"]["id"] for item in remaining] == [items[1]["recipient"]["id"]]
    assert client.delete(f"/api/notifications/{first_id}", headers=headers).status_code == 404


def test_other_users_cannot_touch_a_notification(
    client, session, make_user, make_event, auth_headers
):
    creator, guest, _ = _pending_request(session, make_user, make_event)
    [item] = client.get("/api/notifications", headers=auth_headers(creator)).json()
    recipient_id = item["recipient"]["id"]

    assert client.patch(
        f"/api/notifications/{recipient_id}/read", headers=auth_headers(guest)
    ).status_code == 404
    assert client.delete(
        f"/api/notifications/{recipient_id}", headers=auth_headers(guest)
    ).status_code == 404


def test_websocket_requires_valid_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/api/notifications/ws") as websocket:
            websocket.receive_json()

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/api/notifications/ws?token=invalido") as websocket:
            websocket.receive_json()


def test_websocket_sends_unread_on_connect_and_pushes_new_ones(
    client, session, make_user, make_event, auth_headers
):
    creator, guest, participation = _pending_request(session, make_user, make_event)
    token = create_user_access_token(guest.id, guest.password, guest.is_active)

    with client.websocket_connect(f"/api/notifications/ws?token={token}") as websocket:
        init = websocket.receive_json()
        assert init == {"type": "init", "data": []}

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        response = client.patch(
            f"/api/participants/{participation.id}/approve", headers=auth_headers(creator)
        )
        assert response.status_code == 200

        pushed = websocket.receive_json()
        assert pushed["type"] == "notification"
        assert pushed["data"]["notification"]["type"] == "participation_approved"
        assert pushed["data"]["recipient"]["user_id"] == guest.id

        websocket.send_json({"type": "ack", "ids": [pushed["data"]["recipient"]["id"]]})
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

    [item] = client.get("/api/notifications", headers=auth_headers(guest)).json()
    assert item["recipient"]["read"] is True


def test_websocket_init_contains_unread_items(client, session, make_user, make_event):
    creator, _, participation = _pending_request(session, make_user, make_event)
    token = create_user_access_token(creator.id, creator.password, creator.is_active)

    with client.websocket_connect(f"/api/notifications/ws?token={token}") as websocket:
        init = websocket.receive_json()

    assert init["type"] == "init"
    [item] = init["data"]
    assert item["notification"]["source_id"] == participation.id
