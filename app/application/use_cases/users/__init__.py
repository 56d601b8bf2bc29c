"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .change_password import change_password
from .get_user import get_user
from .record_login import record_login
from .register_user import ADMIN_USER_ID, create_admin_user, register_user

__all__ = [
    "ADMIN_USER_ID",
    "AuthenticationStatus",
    "authenticate_user",
    "change_password",
    "create_admin_user",
    "get_user",
    "record_login",
    "register_user",
]
