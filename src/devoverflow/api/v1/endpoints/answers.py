# src/devoverflow/api/v1/endpoints/answers.py
"""Answer-related endpoints for the DevOverflow API."""

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm import Session

from devoverflow.api.v1.dependencies import CurrentUserDep, SessionDep, ensure_same_user
from devoverflow.models import Answer, AnswerVote, User
from devoverflow.models.vote import VOTE_DOWN, VOTE_UP
from devoverflow.schemas.answer import AnswerCreate, AnswerResponse, AnswerUpdate
from devoverflow.schemas.common import DataResponse, MessageResponse
from devoverflow.schemas.vote import AnswerToggle, MyVoteResponse
from devoverflow.services import answers as answer_service
from devoverflow.services.questions import get_question
from devoverflow.services.toggles import current_vote, toggle_vote

router = APIRouter(prefix="/answers", tags=["answers"])


def _get_answer_or_404(db: Session, answer_id: str) -> Answer:
    answer = answer_service.get_answer(db, answer_id)
    if answer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Answer not found")
    return answer


def _ensure_author(answer: Answer, user: User) -> None:
    if answer.author_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the author can modify this answer",
        )


def _toggle_answer_vote(db: Session, current_user: User, payload: AnswerToggle, direction: int) -> None:
    ensure_same_user(current_user, payload.user_id)
    _get_answer_or_404(db, payload.answer_id)
    toggle_vote(db, AnswerVote, payload.answer_id, current_user.id, direction)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=DataResponse[AnswerResponse],
)
async def create_answer(
    payload: AnswerCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> DataResponse[AnswerResponse]:
    """Answer a question.

    Raises:
        HTTPException: If the question does not exist
    """
    question = get_question(db, payload.question_id)
    if question is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")

    answer = answer_service.create_answer(db, current_user, question, payload.content)
    return DataResponse[AnswerResponse](data=AnswerResponse.model_validate(answer))


@router.post("/upvotes", response_model=MessageResponse)
async def toggle_answer_upvote(
    payload: AnswerToggle,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Toggle the caller's upvote on an answer."""
    _toggle_answer_vote(db, current_user, payload, VOTE_UP)
    return MessageResponse(message="Upvote answer toggled successfully")


@router.post("/downvotes", response_model=MessageResponse)
async def toggle_answer_downvote(
    payload: AnswerToggle,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Toggle the caller's downvote on an answer."""
    _toggle_answer_vote(db, current_user, payload, VOTE_DOWN)
    return MessageResponse(message="Downvote answer toggled successfully")


@router.get("/{answer_id}/my-vote", response_model=MyVoteResponse)
async def get_my_answer_vote(
    answer_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MyVoteResponse:
    """Return the caller's vote on an answer: 1, -1 or 0."""
    _get_answer_or_404(db, answer_id)
    return MyVoteResponse(direction=current_vote(db, AnswerVote, answer_id, current_user.id))


@router.get("/{answer_id}", response_model=DataResponse[AnswerResponse])
async def get_answer(answer_id: str, db: SessionDep) -> DataResponse[AnswerResponse]:
    """Get a single answer."""
    answer = _get_answer_or_404(db, answer_id)
    return DataResponse[AnswerResponse](data=AnswerResponse.model_validate(answer))


@router.patch("/{answer_id}", response_model=DataResponse[AnswerResponse])
async def edit_answer(
    answer_id: str,
    payload: AnswerUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> DataResponse[AnswerResponse]:
    """Replace the body of the caller's own answer."""
    answer = _get_answer_or_404(db, answer_id)
    _ensure_author(answer, current_user)
    answer = answer_service.edit_answer(db, answer, payload.content)
    return DataResponse[AnswerResponse](data=AnswerResponse.model_validate(answer))


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete the caller's own answer."""
    answer = _get_answer_or_404(db, answer_id)
    _ensure_author(answer, current_user)
    answer_service.delete_answer(db, answer)
    return MessageResponse(message="Answer deleted successfully")
