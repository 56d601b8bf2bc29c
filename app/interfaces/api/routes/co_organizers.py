"""Endpoints de convites e gestão de coorganizadores."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.co_organizers import (
    accept_invite,
    cancel_invite,
    invite_co_organizer,
    list_co_organizers,
    list_invites,
    reject_invite,
    remove_co_organizer,
    resend_invite,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import (
    CoOrganizerInviteCreate,
    CoOrganizerInviteRead,
    CoOrganizerRead,
)

from .serializers import co_organizer_to_schema

router = APIRouter(prefix="/api", tags=["co-organizers"])


@router.post(
    "/events/{event_id}/co-organizer-invites",
    response_model=CoOrganizerInviteRead,
    status_code=status.HTTP_201_CREATED,
)
def create_invite(
    event_id: int,
    payload: CoOrganizerInviteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> CoOrganizerInviteRead:
    """Convida um e-mail para coorganizar o evento."""

    invite = invite_co_organizer(
        db,
        event_id=event_id,
        actor_id=current_user.id,
        email=payload.email,
        message=payload.message,
    )
    return CoOrganizerInviteRead.model_validate(invite)


@router.get(
    "/events/{event_id}/co-organizer-invites", response_model=list[CoOrganizerInviteRead]
)
def read_invites(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[CoOrganizerInviteRead]:
    """Lista os convites enviados para o evento."""

    invites = list_invites(db, event_id=event_id, actor_id=current_user.id)
    return [CoOrganizerInviteRead.model_validate(invite) for invite in invites]


@router.delete(
    "/events/{event_id}/co-organizer-invites/{invite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_invite(
    event_id: int,
    invite_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Cancela um convite pendente."""

    cancel_invite(db, event_id=event_id, invite_id=invite_id, actor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/events/{event_id}/co-organizer-invites/{invite_id}/resend",
    response_model=CoOrganizerInviteRead,
)
def resend(
    event_id: int,
    invite_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> CoOrganizerInviteRead:
    """Reenvia o e-mail de um convite pendente."""

    invite = resend_invite(db, event_id=event_id, invite_id=invite_id, actor_id=current_user.id)
    return CoOrganizerInviteRead.model_validate(invite)


@router.post("/co-organizer-invites/{token}/accept", response_model=CoOrganizerInviteRead)
def accept(
    token: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> CoOrganizerInviteRead:
    """Aceita o convite e torna o usuário coorganizador."""

    return CoOrganizerInviteRead.model_validate(
        accept_invite(db, token=token, user_id=current_user.id)
    )


@router.post("/co-organizer-invites/{token}/reject", response_model=CoOrganizerInviteRead)
def reject(
    token: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> CoOrganizerInviteRead:
    """Recusa o convite."""

    return CoOrganizerInviteRead.model_validate(
        reject_invite(db, token=token, user_id=current_user.id)
    )


@router.get("/events/{event_id}/co-organizers", response_model=list[CoOrganizerRead])
def read_co_organizers(event_id: int, db: Session = Depends(get_db)) -> list[CoOrganizerRead]:
    """Lista os coorganizadores do evento."""

    return [co_organizer_to_schema(entry) for entry in list_co_organizers(db, event_id=event_id)]


@router.delete(
    "/events/{event_id}/co-organizers/{user_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_co_organizer(
    event_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Remove um coorganizador do evento."""

    remove_co_organizer(db, event_id=event_id, user_id=user_id, actor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
