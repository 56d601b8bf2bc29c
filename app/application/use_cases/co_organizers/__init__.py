"""Use cases for sharing event management with co-organizers."""

from .invites import cancel_invite, invite_co_organizer, list_invites, resend_invite
from .members import CoOrganizerEntry, list_co_organizers, remove_co_organizer
from .responses import accept_invite, reject_invite

__all__ = [
    "CoOrganizerEntry",
    "accept_invite",
    "cancel_invite",
    "invite_co_organizer",
    "list_co_organizers",
    "list_invites",
    "reject_invite",
    "remove_co_organizer",
    "resend_invite",
]
