"""Endpoints de moderação de participantes."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.participation import (
    approve_participation,
    reject_participation,
    remove_participation,
    revert_participation,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import ParticipationRead

router = APIRouter(prefix="/api/participants", tags=["participants"])


@router.patch("/{participation_id}/approve", response_model=ParticipationRead)
def approve(
    participation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRead:
    """Aprova uma solicitação pendente e notifica o participante."""

    participation = approve_participation(
        db, participation_id=participation_id, actor_id=current_user.id
    )
    return ParticipationRead.model_validate(participation)


@router.patch("/{participation_id}/reject", response_model=ParticipationRead)
def reject(
    participation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRead:
    """Recusa uma solicitação pendente e notifica o participante."""

    participation = reject_participation(
        db, participation_id=participation_id, actor_id=current_user.id
    )
    return ParticipationRead.model_validate(participation)


@router.patch("/{participation_id}/revert", response_model=ParticipationRead)
def revert(
    participation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRead:
    """Devolve uma solicitação revisada ao estado pendente."""

    participation = revert_participation(
        db, participation_id=participation_id, actor_id=current_user.id
    )
    return ParticipationRead.model_validate(participation)


@router.delete("/{participation_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove(
    participation_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Remove uma participação (o próprio participante ou um organizador)."""

    remove_participation(db, participation_id=participation_id, actor_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
