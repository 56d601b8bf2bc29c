"""Use cases for browsing event categories."""

from .list_categories import list_categories, list_subcategories

__all__ = ["list_categories", "list_subcategories"]
