"""Validation helpers shared by user use cases."""

from __future__ import annotations

import re

from app.domain.errors import ValidationError

_CPF_PATTERN = re.compile(r"^\d{11}$")
_MIN_PASSWORD_LENGTH = 6


def normalize_username(username: str) -> str:
    """Return the CPF digits of ``username`` or raise ``ValidationError``."""

    digits = re.sub(r"[.\-\s]", "", username or "")
    if not _CPF_PATTERN.match(digits):
        raise ValidationError("CPF deve conter 11 dígitos")
    return digits


def normalize_email(email: str) -> str:
    normalized = (email or "").strip().lower()
    if "@" not in normalized:
        raise ValidationError("E-mail inválido")
    return normalized


def ensure_valid_password(password: str) -> None:
    if len(password or "") < _MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"A senha deve ter pelo menos {_MIN_PASSWORD_LENGTH} caracteres"
        )
