"""Transactional email delivery through SendGrid."""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.config import get_settings

logger = logging.getLogger(__name__)


def _describe_sendgrid_body(body: Any) -> str | None:
    """Turn a SendGrid error body into a readable message when possible."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            return body
    if not body:
        return None

    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        messages = [
            str(item["message"])
            for item in body["errors"]
            if isinstance(item, dict) and item.get("message")
        ]
        if messages:
            return "; ".join(messages)
    try:
        return json.dumps(body)
    except (TypeError, ValueError):
        return None


def _log_delivery_failure(source: Any) -> None:
    status_code = getattr(source, "status_code", None)
    details = _describe_sendgrid_body(getattr(source, "body", None))
    if status_code is None and details is None and isinstance(source, Exception):
        logger.exception("Error sending email via SendGrid: %s", source)
        return
    logger.error(
        "SendGrid delivery failed (status %s): %s", status_code, details or "no details"
    )


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` instead of raising so callers can treat email as best
    effort. Missing credentials simply skip delivery.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_delivery_failure(exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_delivery_failure(response)
        return False

    return True


def build_invite_link(token: str) -> str:
    base_url = get_settings().public_base_url.rstrip("/")
    return f"{base_url}/co-organizer-invite/{token}"


def send_co_organizer_invite_email(
    email: str,
    *,
    inviter_name: str,
    event_name: str,
    token: str,
    message: str | None = None,
) -> bool:
    """Invite ``email`` to help organize ``event_name``."""

    link = build_invite_link(token)
    parts = [
        "<p>Olá,</p>",
        (
            f"<p><strong>{escape(inviter_name)}</strong> convidou você para "
            f"coorganizar o evento <strong>{escape(event_name)}</strong> no Baco.</p>"
        ),
    ]
    if message:
        parts.append(f"<blockquote>{escape(message)}</blockquote>")
    parts.append(f'<p><a href="{escape(link)}">Responder ao convite</a></p>')
    parts.append("<p>Se você não esperava este convite, ignore este e-mail.</p>")
    return send_email(
        f"Convite para coorganizar \"{event_name}\"", "".join(parts), email
    )


__all__ = ["build_invite_link", "send_co_organizer_invite_email", "send_email"]
