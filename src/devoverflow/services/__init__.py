"""Business logic services for the DevOverflow application."""

from .pagination import PageParams
from .search import SearchHit, global_search
from .toggles import current_vote, toggle_bookmark, toggle_vote

__all__ = [
    "PageParams",
    "SearchHit",
    "global_search",
    "current_vote",
    "toggle_bookmark",
    "toggle_vote",
]
