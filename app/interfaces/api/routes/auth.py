"""Endpoints de cadastro, autenticação e gestão de senha."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    change_password,
    record_login,
    register_user,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.security import create_user_access_token
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import (
    ChangePasswordRequest,
    MessageResponse,
    RegisterResponse,
    Token,
    UserCreate,
    UserRead,
)

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)) -> RegisterResponse:
    """Cria uma conta e devolve o usuário junto com um token de acesso."""

    user = register_user(db, **payload.model_dump())
    token = create_user_access_token(user.id, user.password, user.is_active)
    return RegisterResponse(access_token=token, user=UserRead.model_validate(user))


# Keeps the signature expected by OAuth2PasswordRequestForm (username = CPF).
@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
) -> Token:
    """Autentica o usuário pelo CPF e devolve um token JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="CPF ou senha incorretos",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuário inativo",
        )

    record_login(db, user.id)
    logger.info("User %s logged in", user.id)
    return Token(access_token=create_user_access_token(user.id, user.password, user.is_active))


@router.get("/user", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)) -> UserRead:
    """Retorna os dados do usuário autenticado."""

    return UserRead.model_validate(current_user)


@router.post("/user/change-password", response_model=MessageResponse)
def update_password(
    payload: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    """Altera a senha do usuário autenticado."""

    change_password(
        db,
        user_id=current_user.id,
        current_password=payload.current_password,
        new_password=payload.new_password,
    )
    return MessageResponse(message="Senha alterada com sucesso")
