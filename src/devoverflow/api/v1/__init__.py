"""Version 1 API endpoints."""

from .endpoints import (
    answers_router,
    auth_router,
    questions_router,
    search_router,
    tags_router,
    users_router,
)

__all__ = [
    "auth_router",
    "questions_router",
    "answers_router",
    "tags_router",
    "users_router",
    "search_router",
]
