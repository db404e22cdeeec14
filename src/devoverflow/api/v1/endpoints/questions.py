# src/devoverflow/api/v1/endpoints/questions.py
"""Question-related endpoints for the DevOverflow API."""

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.orm import Session

from devoverflow.api.v1.dependencies import (
    CurrentUserDep,
    PageDep,
    SessionDep,
    ensure_same_user,
)
from devoverflow.models import Question, QuestionVote, User
from devoverflow.models.vote import VOTE_DOWN, VOTE_UP
from devoverflow.schemas.answer import AnswerResponse
from devoverflow.schemas.common import DataResponse, ListResponse, MessageResponse
from devoverflow.schemas.question import (
    QuestionCreate,
    QuestionDetail,
    QuestionResponse,
    QuestionSummary,
    QuestionUpdate,
    TopQuestion,
)
from devoverflow.schemas.vote import MyVoteResponse, QuestionToggle
from devoverflow.services import answers as answer_service
from devoverflow.services import questions as question_service
from devoverflow.services.recommendations import recommended_questions
from devoverflow.services.toggles import current_vote, toggle_bookmark, toggle_vote

router = APIRouter(prefix="/questions", tags=["questions"])


def _get_question_or_404(db: Session, question_id: str) -> Question:
    question = question_service.get_question(db, question_id)
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return question


def _ensure_author(question: Question, user: User) -> None:
    if question.author_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the author can modify this question",
        )


def _summaries(total: int, questions: list[Question]) -> ListResponse[QuestionSummary]:
    return ListResponse[QuestionSummary](
        results=total,
        data=[QuestionSummary.model_validate(question) for question in questions],
    )


def _toggle_question_vote(
    db: Session,
    current_user: User,
    payload: QuestionToggle,
    direction: int,
) -> None:
    ensure_same_user(current_user, payload.user_id)
    _get_question_or_404(db, payload.question_id)
    toggle_vote(db, QuestionVote, payload.question_id, current_user.id, direction)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=DataResponse[QuestionResponse],
)
async def create_question(
    payload: QuestionCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> DataResponse[QuestionResponse]:
    """Ask a new question.

    Args:
        payload: Title, markdown content and tag names
        current_user: The asking user
        db: Database session

    Returns:
        The stored question with its resolved tags
    """
    question = question_service.create_question(
        db,
        current_user,
        title=payload.title,
        content=payload.content,
        tags=payload.tags,
    )
    return DataResponse[QuestionResponse](data=QuestionResponse.model_validate(question))


@router.get("", response_model=ListResponse[QuestionSummary])
async def list_questions(db: SessionDep, params: PageDep) -> ListResponse[QuestionSummary]:
    """List questions as ``newest`` (default), ``frequent`` or ``unanswered``."""
    total, questions = question_service.list_questions(db, params)
    return _summaries(total, questions)


@router.get("/top", response_model=DataResponse[list[TopQuestion]])
async def top_questions(db: SessionDep) -> DataResponse[list[TopQuestion]]:
    """Return the five most viewed questions."""
    questions = question_service.top_questions(db)
    return DataResponse[list[TopQuestion]](
        data=[TopQuestion.model_validate(question) for question in questions]
    )


@router.get("/recommended", response_model=ListResponse[QuestionSummary])
async def get_recommended_questions(
    current_user: CurrentUserDep,
    db: SessionDep,
    params: PageDep,
) -> ListResponse[QuestionSummary]:
    """Recommend questions sharing tags the caller has interacted with."""
    total, questions = recommended_questions(db, current_user.id, params)
    return _summaries(total, questions)


@router.post("/upvotes", response_model=MessageResponse)
async def toggle_question_upvote(
    payload: QuestionToggle,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Toggle the caller's upvote on a question."""
    _toggle_question_vote(db, current_user, payload, VOTE_UP)
    return MessageResponse(message="Upvote toggled successfully")


@router.post("/downvotes", response_model=MessageResponse)
async def toggle_question_downvote(
    payload: QuestionToggle,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Toggle the caller's downvote on a question."""
    _toggle_question_vote(db, current_user, payload, VOTE_DOWN)
    return MessageResponse(message="Downvote toggled successfully")


@router.post("/bookmark", response_model=MessageResponse)
async def toggle_question_bookmark(
    payload: QuestionToggle,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Add or remove a question from the caller's bookmarks."""
    ensure_same_user(current_user, payload.user_id)
    _get_question_or_404(db, payload.question_id)
    toggle_bookmark(db, payload.question_id, current_user.id)
    return MessageResponse(message="Bookmark toggled successfully")


@router.get("/bookmark", response_model=ListResponse[QuestionSummary])
async def list_bookmarks(
    current_user: CurrentUserDep,
    db: SessionDep,
    params: PageDep,
) -> ListResponse[QuestionSummary]:
    """List the caller's bookmarks, ``newest`` (default) or ``oldest`` first."""
    total, questions = question_service.bookmarked_questions(db, current_user.id, params)
    return _summaries(total, questions)


@router.post("/views/{question_id}", response_model=MessageResponse)
async def increment_question_views(question_id: str, db: SessionDep) -> MessageResponse:
    """Count one view of a question."""
    if not question_service.increment_views(db, question_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return MessageResponse(message="View recorded")


@router.get("/{question_id}/my-vote", response_model=MyVoteResponse)
async def get_my_question_vote(
    question_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MyVoteResponse:
    """Return the caller's vote on a question: 1, -1 or 0."""
    _get_question_or_404(db, question_id)
    return MyVoteResponse(direction=current_vote(db, QuestionVote, question_id, current_user.id))


@router.get("/{question_id}/answers", response_model=ListResponse[AnswerResponse])
async def list_question_answers(
    question_id: str,
    db: SessionDep,
    filter: str | None = Query(None, description="Answer ordering"),
) -> ListResponse[AnswerResponse]:
    """List every answer of a question in the requested order."""
    _get_question_or_404(db, question_id)
    answers = answer_service.list_answers(db, question_id, filter)
    return ListResponse[AnswerResponse](
        results=len(answers),
        data=[AnswerResponse.model_validate(answer) for answer in answers],
    )


@router.get("/{question_id}", response_model=DataResponse[QuestionDetail])
async def get_question(question_id: str, db: SessionDep) -> DataResponse[QuestionDetail]:
    """Get a question with its answers, voters and bookmarkers.

    Raises:
        HTTPException: If the question does not exist
    """
    question = question_service.get_question_detail(db, question_id)
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    return DataResponse[QuestionDetail](data=QuestionDetail.model_validate(question))


@router.patch("/{question_id}", response_model=DataResponse[QuestionResponse])
async def edit_question(
    question_id: str,
    payload: QuestionUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> DataResponse[QuestionResponse]:
    """Edit the title or content of the caller's own question."""
    question = _get_question_or_404(db, question_id)
    _ensure_author(question, current_user)
    question = question_service.edit_question(
        db,
        question,
        title=payload.title,
        content=payload.content,
    )
    return DataResponse[QuestionResponse](data=QuestionResponse.model_validate(question))


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete the caller's own question and everything attached to it."""
    question = _get_question_or_404(db, question_id)
    _ensure_author(question, current_user)
    question_service.delete_question(db, question)
    return MessageResponse(message="Question deleted successfully")
