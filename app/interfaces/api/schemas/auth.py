"""Authentication related schemas."""

from pydantic import BaseModel, Field

from .user import UserRead


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class RegisterResponse(Token):
    user: UserRead


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, description="Nova senha do usuário")
