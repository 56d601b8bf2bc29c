"""Domain entities describing event categories."""

from dataclasses import dataclass


@dataclass
class EventCategory:
    """Top level grouping used to browse events."""

    id: int | None
    name: str
    slug: str
    color: str
    age_restriction: int | None = None


@dataclass
class EventSubcategory:
    """Optional refinement of an :class:`EventCategory`."""

    id: int | None
    category_id: int
    name: str
    slug: str


__all__ = ["EventCategory", "EventSubcategory"]
