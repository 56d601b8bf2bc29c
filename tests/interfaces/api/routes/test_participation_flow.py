from __future__ import annotations

import pytest

from app.domain.entities import EVENT_TYPE_PUBLIC


def _notifications(client, headers):
    response = client.get("/api/notifications", headers=headers)
    assert response.status_code == 200
    return response.json()


def test_application_approval_flow(client, make_user, make_event, auth_headers):
    creator = make_user("Carla", "Lima")
    guest = make_user("João", "Silva")
    event = make_event(creator, name="Luau")
    creator_headers = auth_headers(creator)
    guest_headers = auth_headers(guest)

    applied = client.post(
        f"/api/events/{event.id}/participate",
        json={"application_reason": "Adoro luaus"},
        headers=guest_headers,
    )
    assert applied.status_code == 201
    participation = applied.json()
    assert participation["status"] == "pending"

    [request_notice] = _notifications(client, creator_headers)
    assert request_notice["notification"]["type"] == "participant_request"
    assert request_notice["notification"]["source_id"] == participation["id"]
    assert request_notice["recipient"]["read"] is False

    approved = client.patch(
        f"/api/participants/{participation['id']}/approve", headers=creator_headers
    )
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
    assert approved.json()["reviewed_by"] == creator.id

    again = client.patch(
        f"/api/participants/{participation['id']}/approve", headers=creator_headers
    )
    assert again.status_code == 409
    assert set(again.json()) == {"message"}

    [approval_notice] = _notifications(client, guest_headers)
    assert approval_notice["notification"]["title"] == "Solicitação aprovada"
    assert approval_notice["notification"]["message"] == (
        'Sua solicitação para experienciar o evento "Luau" foi aprovada!'
    )

    mine = client.get(f"/api/events/{event.id}/participation", headers=guest_headers)
    assert mine.json()["status"] == "approved"


def test_guest_cannot_moderate(client, make_user, make_event, auth_headers):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    participation = client.post(
        f"/api/events/{event.id}/participate", headers=auth_headers(guest)
    ).json()

    response = client.patch(
        f"/api/participants/{participation['id']}/approve", headers=auth_headers(guest)
    )

    assert response.status_code == 403
    assert client.patch(
        "/api/participants/999/approve", headers=auth_headers(creator)
    ).status_code == 404


def test_public_event_confirms_immediately(client, make_user, make_event, auth_headers):
    creator = make_user()
    guest = make_user()
    event = make_event(creator, event_type=EVENT_TYPE_PUBLIC)

    response = client.post(f"/api/events/{event.id}/participate", headers=auth_headers(guest))

    assert response.status_code == 201
    assert response.json()["status"] == "confirmed"
    assert _notifications(client, auth_headers(creator)) == []

    duplicate = client.post(f"/api/events/{event.id}/participate", headers=auth_headers(guest))
    assert duplicate.status_code == 409


def test_cancel_participation_and_reapply(client, make_user, make_event, auth_headers):
    creator = make_user()
    guest = make_user()
    event = make_event(creator)
    headers = auth_headers(guest)
    client.post(f"/api/events/{event.id}/participate", headers=headers)

    cancel = client.post(f"/api/events/{event.id}/cancel-participation", headers=headers)
    assert cancel.status_code == 200
    assert client.get(f"/api/events/{event.id}/participation", headers=headers).status_code == 404

    reapply = client.post(f"/api/events/{event.id}/participate", headers=headers)
    assert reapply.status_code == 201
    assert len(_notifications(client, auth_headers(creator))) == 2


def test_event_detail_lists_participants(client, make_user, make_event, auth_headers):
    creator = make_user("Carla", "Lima")
    guest = make_user("João", "Silva")
    event = make_event(creator)
    client.post(f"/api/events/{event.id}/participate", headers=auth_headers(guest))

    detail = client.get(f"/api/events/{event.id}")

    assert detail.status_code == 200
    body = detail.json()
    assert body["creator"]["first_name"] == "Carla"
    assert body["category"]["slug"] == "party"
    assert [item["user"]["first_name"] for item in body["participants"]] == ["João"]
    assert client.get("/api/events/999").status_code == 404


def test_create_update_and_delete_event(client, make_user, auth_headers):
    creator = make_user()
    headers = auth_headers(creator)
    categories = client.get("/api/categories").json()
    party_id = next(item["id"] for item in categories if item["slug"] == "party")

    created = client.post(
        "/api/events",
        json={
            "name": "Aniversário",
            "description": "30 anos",
            "date": "2030-03-10",
            "time_start": "19:30",
            "location": "Salão",
            "category_id": party_id,
            "event_type": "private_application",
        },
        headers=headers,
    )
    assert created.status_code == 201
    event_id = created.json()["id"]
    assert created.json()["creator_id"] == creator.id

    updated = client.put(f"/api/events/{event_id}", json={"location": "Quintal"}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["location"] == "Quintal"

    assert client.get("/api/search", params={"q": "quintal"}).json()[0]["id"] == event_id
    assert client.get("/api/search", params={"q": "  "}).json() == []

    deleted = client.delete(f"/api/events/{event_id}", headers=headers)
    assert deleted.status_code == 204
    assert client.get(f"/api/events/{event_id}").status_code == 404


def test_invalid_event_payload_is_a_400_message(client, make_user, auth_headers):
    creator = make_user()

    response = client.post("/api/events", json={"name": "Sem data"}, headers=auth_headers(creator))

    assert response.status_code == 400
    assert response.json()["message"].startswith("Dados inválidos")


@pytest.mark.parametrize("field", ["name", "date", "category_id", "is_active", "time_start"])
def test_update_event_with_null_required_field_is_a_400(
    client, make_user, make_event, auth_headers, field
):
    creator = make_user()
    event = make_event(creator)

    response = client.put(
        f"/api/events/{event.id}", json={field: None}, headers=auth_headers(creator)
    )

    assert response.status_code == 400
    assert response.json()["message"] == f"Campos obrigatórios não podem ser nulos: {field}"
    assert client.get(f"/api/events/{event.id}").json()["name"] == "Festa na Laje"


def test_share_event_endpoint(client, make_user, make_event):
    creator = make_user("Carla", "Lima")
    event = make_event(creator)

    response = client.get(f"/api/events/{event.id}/share")

    assert response.status_code == 200
    assert response.json() == {
        "link": f"http://localhost:5000/eventos/{event.id}",
        "title": "Festa na Laje - Baco Experiências",
        "description": "Uma festa com amigos",
        "image": None,
        "event": {
            "id": event.id,
            "name": "Festa na Laje",
            "date": "17/05/2030",
            "time": "20:00",
            "location": "Rua das Flores, 10, São Paulo",
            "category": "Festa",
            "creator": "Carla Lima",
        },
    }
    assert client.get("/api/events/999/share").json() == {"message": "Evento não encontrado"}


def test_created_events_include_participants(client, make_user, make_event, auth_headers):
    creator = make_user("Carla", "Lima")
    guest = make_user("João", "Silva")
    event = make_event(creator)
    client.post(f"/api/events/{event.id}/participate", headers=auth_headers(guest))

    response = client.get("/api/user/events/created", headers=auth_headers(creator))

    assert response.status_code == 200
    [created] = response.json()
    assert created["id"] == event.id
    assert created["category"]["slug"] == "party"
    assert created["creator"]["first_name"] == "Carla"
    assert [
        (item["status"], item["user"]["first_name"]) for item in created["participants"]
    ] == [("pending", "João")]


def test_chat_endpoints(client, make_user, make_event, auth_headers):
    creator = make_user("Carla", "Lima")
    guest = make_user()
    event = make_event(creator)
    participation = client.post(
        f"/api/events/{event.id}/participate", headers=auth_headers(guest)
    ).json()

    denied = client.get(f"/api/events/{event.id}/chat", headers=auth_headers(guest))
    assert denied.status_code == 403
    assert denied.json() == {"message": "Acesso ao chat negado"}

    client.patch(
        f"/api/participants/{participation['id']}/approve", headers=auth_headers(creator)
    )
    posted = client.post(
        f"/api/events/{event.id}/chat", json={"content": "Oi!"}, headers=auth_headers(creator)
    )
    assert posted.status_code == 201
    assert posted.json()["sender"]["first_name"] == "Carla"

    messages = client.get(f"/api/events/{event.id}/chat", headers=auth_headers(guest)).json()
    assert [item["content"] for item in messages] == ["Oi!"]


def test_categories_and_subcategories(client):
    categories = client.get("/api/categories").json()
    by_slug = {item["slug"]: item for item in categories}

    assert by_slug["adult"]["age_restriction"] == 18
    concert_id = by_slug["concert"]["id"]
    subcategories = client.get(f"/api/categories/{concert_id}/subcategories").json()
    assert {item["slug"] for item in subcategories} == {"rock", "electronic", "samba"}
    assert len(client.get("/api/subcategories").json()) == 7
    assert client.get("/api/categories/999/subcategories").status_code == 404
