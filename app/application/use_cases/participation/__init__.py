"""Use cases driving the participation lifecycle."""

from .remove_participation import (
    cancel_participation,
    get_participation,
    remove_participation,
)
from .request_participation import request_participation
from .review_participation import (
    approve_participation,
    reject_participation,
    revert_participation,
)

__all__ = [
    "approve_participation",
    "cancel_participation",
    "get_participation",
    "reject_participation",
    "remove_participation",
    "request_participation",
    "revert_participation",
]
