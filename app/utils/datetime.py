"""Timestamps in the application timezone.

Domain objects carry aware datetimes. Database columns are plain ``DateTime``,
so values are stored as naive wall-clock times in ``APP_TIMEZONE`` and made
aware again when read back.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "America/Sao_Paulo"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone named by ``APP_TIMEZONE``, falling back to São Paulo."""

    name = get_settings().app_timezone.strip() or FALLBACK_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; using %s", name, FALLBACK_TIMEZONE)
        return ZoneInfo(FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for ``created_at``-style fields."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the app timezone.

    Naive values are taken to be wall-clock times in that zone, which is how
    :func:`ensure_app_naive_datetime` stores them.
    """

    if value is None:
        return None
    zone = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)
