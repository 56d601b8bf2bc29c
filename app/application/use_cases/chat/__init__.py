"""Use cases for the per-event chat."""

from .gate import ChatAccess, check_chat_access
from .messages import MAX_MESSAGE_LENGTH, list_chat_messages, send_chat_message

__all__ = [
    "ChatAccess",
    "MAX_MESSAGE_LENGTH",
    "check_chat_access",
    "list_chat_messages",
    "send_chat_message",
]
