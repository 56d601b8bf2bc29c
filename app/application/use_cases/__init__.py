"""Aggregate application use cases."""

from .users import authenticate_user, record_login, register_user

__all__ = [
    "authenticate_user",
    "record_login",
    "register_user",
]
