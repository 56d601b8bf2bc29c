"""Endpoints de perfis de usuário e dos eventos do usuário autenticado."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.events import (
    list_created_events,
    list_participating_events,
)
from app.application.use_cases.users import get_user
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import EventDetailRead, EventRead, UserProfile

from .serializers import event_details_to_schema, events_to_schema

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users/{user_id}", response_model=UserProfile)
def read_user(user_id: int, db: Session = Depends(get_db)) -> UserProfile:
    """Retorna o perfil público de um usuário."""

    return UserProfile.model_validate(get_user(db, user_id))


@router.get("/user/events/created", response_model=list[EventDetailRead])
def read_created_events(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[EventDetailRead]:
    """Lista os eventos criados pelo usuário autenticado com seus participantes."""

    details = list_created_events(db, user_id=current_user.id)
    return [event_details_to_schema(item) for item in details]


@router.get("/user/events/participating", response_model=list[EventRead])
def read_participating_events(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[EventRead]:
    """Lista os eventos dos quais o usuário autenticado participa."""

    return events_to_schema(list_participating_events(db, user_id=current_user.id))
