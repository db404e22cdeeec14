# src/devoverflow/api/v1/endpoints/search.py
"""Global search endpoint."""

from fastapi import APIRouter, Query

from devoverflow.api.v1.dependencies import SessionDep
from devoverflow.schemas.common import DataResponse
from devoverflow.schemas.search import SearchResult
from devoverflow.services.search import global_search

router = APIRouter(prefix="/global-search", tags=["search"])


@router.get("", response_model=DataResponse[list[SearchResult]])
async def search(
    db: SessionDep,
    query: str = Query(..., min_length=1, description="Text to look for"),
    type: str | None = Query(None, description="question, user, answer or tag"),
) -> DataResponse[list[SearchResult]]:
    """Search questions, users, answers and tags at once, or one kind only."""
    hits = global_search(db, query, type)
    return DataResponse[list[SearchResult]](
        data=[SearchResult.model_validate(hit) for hit in hits]
    )
