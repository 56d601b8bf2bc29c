"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone
from hashlib import sha256
import secrets

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings

# A single hashing library (passlib). Tune "rounds" to the CPU budget.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def needs_rehash(hashed_password: str) -> bool:
    return pwd_context.needs_update(hashed_password)


def password_signature(hashed_password: str, is_active: bool) -> str:
    """Fingerprint embedded in tokens so a password change revokes them."""

    return sha256(f"{hashed_password}:{int(is_active)}".encode()).hexdigest()


# ---- JWT ----
settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm="HS256")


def create_user_access_token(user_id: int, hashed_password: str, is_active: bool) -> str:
    """Issue a bearer token for ``user_id`` bound to its current password."""

    return create_access_token(
        {
            "sub": str(user_id),
            "pwd_sig": password_signature(hashed_password, is_active),
        }
    )


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=["HS256"])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def generate_invite_token() -> str:
    """Return a URL-safe token used in co-organizer invitation links."""

    return secrets.token_urlsafe(32)
