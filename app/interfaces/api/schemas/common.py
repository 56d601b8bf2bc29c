"""Schemas shared by several routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
