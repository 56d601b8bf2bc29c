"""Registry of the websockets subscribed to each user's notification feed."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationSocketRegistry:
    """Track which sockets receive pushes for a user.

    A user may keep several tabs open, so every user id maps to the list of
    sockets accepted for it, in the order they subscribed.
    """

    def __init__(self) -> None:
        self._subscribers: dict[int, list[WebSocket]] = {}

    async def subscribe(self, user_id: int, websocket: WebSocket) -> None:
        await websocket.accept()
        sockets = self._subscribers.setdefault(user_id, [])
        if websocket not in sockets:
            sockets.append(websocket)
        logger.debug("User %s subscribed to notifications (%d open)", user_id, len(sockets))

    def unsubscribe(self, user_id: int, websocket: WebSocket) -> None:
        sockets = self._subscribers.get(user_id, [])
        if websocket in sockets:
            sockets.remove(websocket)
        if not sockets:
            self._subscribers.pop(user_id, None)

    def subscriber_count(self, user_id: int) -> int:
        return len(self._subscribers.get(user_id, []))

    def has_subscribers(self, user_id: int) -> bool:
        return self.subscriber_count(user_id) > 0

    async def push(self, user_id: int, message: dict[str, Any]) -> int:
        """Send ``message`` to the user's sockets and return how many got it.

        Sockets that fail to send are unsubscribed.
        """

        delivered = 0
        for websocket in tuple(self._subscribers.get(user_id, [])):
            try:
                await websocket.send_json(message)
            except Exception:  # pragma: no cover - socket closed underneath us
                logger.debug("Unsubscribing stale notification socket of user %s", user_id)
                self.unsubscribe(user_id, websocket)
            else:
                delivered += 1
        return delivered


notification_sockets = NotificationSocketRegistry()


__all__ = ["NotificationSocketRegistry", "notification_sockets"]
