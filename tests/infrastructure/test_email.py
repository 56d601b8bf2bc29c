from __future__ import annotations

from types import SimpleNamespace

import pytest

from app.config import reset_settings_cache
from app.infrastructure import email as email_module


@pytest.fixture()
def sendgrid_configured(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test")
    monkeypatch.setenv("SENDGRID_SENDER", "no-reply@baco.test")
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://baco.test/")
    reset_settings_cache()
    yield
    monkeypatch.undo()
    reset_settings_cache()


class _RecordingClient:
    sent: list = []
    status_code = 202

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def send(self, message):
        type(self).sent.append(message)
        return SimpleNamespace(status_code=type(self).status_code, body=b"")


@pytest.fixture()
def recording_client(monkeypatch: pytest.MonkeyPatch):
    _RecordingClient.sent = []
    _RecordingClient.status_code = 202
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingClient)
    return _RecordingClient


def test_send_email_skips_without_configuration(recording_client):
    assert email_module.send_email("Assunto", "<p>oi</p>", "ana@example.com") is False
    assert recording_client.sent == []


def test_send_email_delivers_with_sendgrid(sendgrid_configured, recording_client):
    assert email_module.send_email("Assunto", "<p>oi</p>", "ana@example.com") is True

    [message] = recording_client.sent
    payload = message.get()
    assert payload["from"]["email"] == "no-reply@baco.test"
    assert payload["subject"] == "Assunto"


def test_send_email_reports_rejected_delivery(sendgrid_configured, recording_client):
    recording_client.status_code = 400

    assert email_module.send_email("Assunto", "<p>oi</p>", "ana@example.com") is False


def test_invite_email_links_to_token(sendgrid_configured, recording_client):
    sent = email_module.send_co_organizer_invite_email(
        "helper@example.com",
        inviter_name="Carla <Lima>",
        event_name="Luau",
        token="abc123",
        message="Vem!",
    )

    assert sent is True
    payload = recording_client.sent[0].get()
    html = payload["content"][0]["value"]
    assert "https://baco.test/co-organizer-invite/abc123" in html
    assert "Carla &lt;Lima&gt;" in html
    assert "<blockquote>Vem!</blockquote>" in html


def test_describe_sendgrid_body_extracts_error_messages():
    body = b'{"errors": [{"message": "invalid key"}, {"message": "try again"}]}'

    assert email_module._describe_sendgrid_body(body) == "invalid key; try again"
    assert email_module._describe_sendgrid_body("  ") is None
    assert email_module._describe_sendgrid_body("plain failure") == "plain failure"
