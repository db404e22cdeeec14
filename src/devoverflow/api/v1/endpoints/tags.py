# src/devoverflow/api/v1/endpoints/tags.py
"""Tag endpoints for the DevOverflow API."""

from fastapi import APIRouter, HTTPException, status

from devoverflow.api.v1.dependencies import PageDep, SessionDep
from devoverflow.schemas.common import DataResponse, ListResponse
from devoverflow.schemas.question import QuestionSummary, TagSummary
from devoverflow.schemas.tag import TagQuestions, TagResponse
from devoverflow.services import tags as tag_service

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=ListResponse[TagResponse])
async def list_tags(db: SessionDep, params: PageDep) -> ListResponse[TagResponse]:
    """List tags as ``popular_tag`` (default), ``recent_tag``, ``old_tag`` or ``name``."""
    total, tags = tag_service.list_tags(db, params)
    return ListResponse[TagResponse](
        results=total,
        data=[TagResponse.model_validate(tag) for tag in tags],
    )


@router.get("/top", response_model=DataResponse[list[TagResponse]])
async def top_tags(db: SessionDep) -> DataResponse[list[TagResponse]]:
    """Return the five tags attached to the most questions."""
    tags = tag_service.top_tags(db)
    return DataResponse[list[TagResponse]](data=[TagResponse.model_validate(tag) for tag in tags])


@router.get("/{tag_id}", response_model=DataResponse[TagQuestions])
async def get_tag_questions(
    tag_id: str,
    db: SessionDep,
    params: PageDep,
) -> DataResponse[TagQuestions]:
    """Return one page of the questions carrying a tag.

    Raises:
        HTTPException: If the tag does not exist
    """
    tag = tag_service.get_tag(db, tag_id)
    if tag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")

    total, questions = tag_service.questions_by_tag(db, tag_id, params)
    return DataResponse[TagQuestions](
        data=TagQuestions(
            tag=TagSummary.model_validate(tag),
            questions_count=total,
            questions=[QuestionSummary.model_validate(question) for question in questions],
        )
    )
