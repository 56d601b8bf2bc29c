"""Endpoints do chat dos eventos do tipo 'Experienciar'."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.chat import list_chat_messages, send_chat_message
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import ChatMessageCreate, ChatMessageRead

from .serializers import chat_message_to_schema

router = APIRouter(prefix="/api/events/{event_id}/chat", tags=["chat"])


@router.get("", response_model=list[ChatMessageRead])
def read_messages(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[ChatMessageRead]:
    """Lista as mensagens visíveis para o usuário autenticado."""

    messages = list_chat_messages(db, event_id=event_id, user_id=current_user.id)
    senders = UserRepository(db).get_map_by_ids([message.sender_id for message in messages])
    return [chat_message_to_schema(message, senders) for message in messages]


@router.post("", response_model=ChatMessageRead, status_code=status.HTTP_201_CREATED)
def post_message(
    event_id: int,
    payload: ChatMessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ChatMessageRead:
    """Envia uma mensagem ao chat do evento."""

    message = send_chat_message(
        db, event_id=event_id, user_id=current_user.id, content=payload.content
    )
    return chat_message_to_schema(message, {current_user.id: current_user})
