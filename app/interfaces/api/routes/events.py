"""Endpoints de eventos e da participação do usuário autenticado."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.events import (
    create_event,
    delete_event,
    get_event,
    list_events,
    list_participants,
    search_events,
    share_event,
    update_event,
)
from app.application.use_cases.participation import (
    cancel_participation,
    get_participation,
    request_participation,
)
from app.domain.entities import User
from app.domain.errors import NotFoundError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import (
    EventCreate,
    EventDetailRead,
    EventRead,
    EventShareRead,
    EventUpdate,
    MessageResponse,
    ParticipantRead,
    ParticipationRead,
    ParticipationRequest,
)

from .serializers import (
    event_details_to_schema,
    event_to_schema,
    events_to_schema,
    participant_to_schema,
)

router = APIRouter(prefix="/api", tags=["events"])


@router.get("/search", response_model=list[EventRead])
def search(q: str | None = Query(default=None), db: Session = Depends(get_db)) -> list[EventRead]:
    """Busca eventos por nome, descrição ou local."""

    return events_to_schema(search_events(db, query=q))


@router.get("/events", response_model=list[EventRead])
def read_events(
    category: str | None = Query(default=None, description="Slug da categoria"),
    db: Session = Depends(get_db),
) -> list[EventRead]:
    """Lista os eventos ativos, opcionalmente filtrados por categoria."""

    return events_to_schema(list_events(db, category_slug=category))


@router.get("/events/{event_id}", response_model=EventDetailRead)
def read_event(event_id: int, db: Session = Depends(get_db)) -> EventDetailRead:
    """Retorna um evento com sua categoria, criador e participantes."""

    return event_details_to_schema(get_event(db, event_id=event_id))


@router.get("/events/{event_id}/share", response_model=EventShareRead)
def read_share_data(event_id: int, db: Session = Depends(get_db)) -> EventShareRead:
    """Retorna o link e o resumo usados para compartilhar o evento."""

    return EventShareRead.model_validate(share_event(db, event_id=event_id))


@router.post("/events", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create(
    payload: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> EventRead:
    """Cria um evento cujo organizador é o usuário autenticado."""

    event = create_event(db, creator_id=current_user.id, **payload.model_dump())
    return event_to_schema(event)


@router.put("/events/{event_id}", response_model=EventRead)
def update(
    event_id: int,
    payload: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> EventRead:
    """Atualiza um evento. Disponível para o criador e os coorganizadores."""

    event = update_event(
        db,
        event_id=event_id,
        actor_id=current_user.id,
        changes=payload.model_dump(exclude_unset=True),
    )
    return event_to_schema(event)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Exclui o evento e avisa os participantes do cancelamento."""

    delete_event(db, event_id=event_id, actor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/events/{event_id}/participants", response_model=list[ParticipantRead])
def read_participants(event_id: int, db: Session = Depends(get_db)) -> list[ParticipantRead]:
    """Lista os participantes de um evento."""

    return [participant_to_schema(item) for item in list_participants(db, event_id=event_id)]


@router.post(
    "/events/{event_id}/participate",
    response_model=ParticipationRead,
    status_code=status.HTTP_201_CREATED,
)
def participate(
    event_id: int,
    payload: ParticipationRequest | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRead:
    """Inscreve o usuário no evento ou envia a solicitação ao organizador."""

    participation = request_participation(
        db,
        event_id=event_id,
        user_id=current_user.id,
        application_reason=payload.application_reason if payload else None,
    )
    return ParticipationRead.model_validate(participation)


@router.get("/events/{event_id}/participation", response_model=ParticipationRead)
def read_participation(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRead:
    """Retorna a participação do usuário autenticado no evento."""

    participation = get_participation(db, event_id=event_id, user_id=current_user.id)
    if participation is None:
        raise NotFoundError("Participação não encontrada")
    return ParticipationRead.model_validate(participation)


@router.post("/events/{event_id}/cancel-participation", response_model=MessageResponse)
def cancel(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    """Cancela a participação do usuário autenticado."""

    cancel_participation(db, event_id=event_id, user_id=current_user.id)
    return MessageResponse(message="Participação cancelada")
