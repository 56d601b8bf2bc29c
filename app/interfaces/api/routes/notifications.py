"""Endpoints and websocket handler for notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from app.domain.entities import User
from app.domain.errors import NotFoundError
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import notification_sockets, serialize_delivery
from app.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from app.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationRead,
    UnreadCountResponse,
)

from .serializers import notification_to_schema

router = APIRouter(prefix="/api/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[NotificationRead])
def read_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Lista as notificações do usuário autenticado, das mais recentes às mais antigas."""

    deliveries = list_notifications(db, user_id=current_user.id)
    return [notification_to_schema(delivery) for delivery in deliveries]


@router.get("/unread-count", response_model=UnreadCountResponse)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountResponse:
    """Retorna quantas notificações ainda não foram lidas."""

    return UnreadCountResponse(count=count_unread_notifications(db, user_id=current_user.id))


# Declared before "/{recipient_id}/read" so "all" is not parsed as an id.
@router.patch("/all/read", response_model=MarkAllReadResponse)
def read_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    """Marca todas as notificações do usuário como lidas."""

    return MarkAllReadResponse(updated=mark_all_notifications_read(db, user_id=current_user.id))


@router.patch("/{recipient_id}/read", response_model=NotificationRead)
def read_one(
    recipient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Marca uma notificação como lida."""

    delivery = mark_notification_read(db, recipient_id=recipient_id, user_id=current_user.id)
    return notification_to_schema(delivery)


@router.delete("/{recipient_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(
    recipient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Remove a notificação da caixa do usuário."""

    delete_notification(db, recipient_id=recipient_id, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuário inativo")
        unread = [
            delivery
            for delivery in list_notifications(session, user_id=user.id)
            if not delivery.recipient.read
        ]
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    finally:
        session.close()

    await notification_sockets.subscribe(user.id, websocket)
    try:
        await websocket.send_json(
            {"type": "init", "data": [serialize_delivery(item) for item in unread]}
        )
        while True:
            message = await websocket.receive_json()
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "ack":
                _acknowledge(user.id, message.get("ids"))
    except WebSocketDisconnect:
        logger.debug("User %s disconnected from notifications", user.id)
    finally:
        notification_sockets.unsubscribe(user.id, websocket)


def _acknowledge(user_id: int, ids: object) -> None:
    if not isinstance(ids, list):
        return
    session = SessionLocal()
    try:
        for recipient_id in ids:
            if not isinstance(recipient_id, int):
                continue
            try:
                mark_notification_read(session, recipient_id=recipient_id, user_id=user_id)
            except NotFoundError:
                continue
    finally:
        session.close()
