# src/devoverflow/api/v1/endpoints/users.py
"""User profile and activity endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.orm import Session

from devoverflow.api.v1.dependencies import CurrentUserDep, PageDep, SessionDep, ensure_same_user
from devoverflow.models import User
from devoverflow.schemas.common import DataResponse, ListResponse
from devoverflow.schemas.question import QuestionSummary
from devoverflow.schemas.user import (
    ProfileUpdateRequest,
    UserProfileResponse,
    UserResponse,
    UserStatsResponse,
    UserTagUsage,
)
from devoverflow.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _get_user_or_404(db: Session, user_id: str) -> User:
    user = user_service.get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def _profile(user: User, question_count: int, answer_count: int) -> UserProfileResponse:
    profile = UserProfileResponse.model_validate(user)
    return profile.model_copy(
        update={"question_count": question_count, "answer_count": answer_count}
    )


@router.get("", response_model=ListResponse[UserProfileResponse])
async def list_users(db: SessionDep, params: PageDep) -> ListResponse[UserProfileResponse]:
    """List users as ``new_users`` (default), ``old_users`` or ``top_contributors``."""
    total, rows = user_service.list_users(db, params)
    return ListResponse[UserProfileResponse](
        results=total,
        data=[_profile(*row) for row in rows],
    )


@router.get("/{user_id}", response_model=DataResponse[UserProfileResponse])
async def get_user_profile(user_id: str, db: SessionDep) -> DataResponse[UserProfileResponse]:
    """Return a public profile with question and answer counts."""
    user = _get_user_or_404(db, user_id)
    question_count, answer_count = user_service.count_user_content(db, user.id)
    return DataResponse[UserProfileResponse](data=_profile(user, question_count, answer_count))


@router.patch("/{user_id}", response_model=DataResponse[UserResponse])
async def update_user_profile(
    user_id: str,
    payload: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> DataResponse[UserResponse]:
    """Update the caller's own profile; omitted fields are left unchanged."""
    ensure_same_user(current_user, user_id)

    update_data = payload.model_dump(exclude_unset=True)
    if update_data.get("portfolio_website") is not None:
        update_data["portfolio_website"] = str(update_data["portfolio_website"])

    username = update_data.get("username")
    if username is not None:
        taken = db.query(User).filter(User.username == username, User.id != current_user.id).first()
        if taken is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username is already taken",
            )

    user = user_service.update_user(db, current_user, update_data)
    logger.info("User %s updated fields %s", user.id, sorted(update_data))
    return DataResponse[UserResponse](data=UserResponse.model_validate(user))


@router.get("/{user_id}/questions", response_model=ListResponse[QuestionSummary])
async def get_user_questions(
    user_id: str,
    db: SessionDep,
    params: PageDep,
) -> ListResponse[QuestionSummary]:
    """List a user's questions, most viewed first."""
    _get_user_or_404(db, user_id)
    total, questions = user_service.user_questions(db, user_id, params)
    return ListResponse[QuestionSummary](
        results=total,
        data=[QuestionSummary.model_validate(question) for question in questions],
    )


@router.get("/{user_id}/stats", response_model=DataResponse[UserStatsResponse])
async def get_user_stats(user_id: str, db: SessionDep) -> DataResponse[UserStatsResponse]:
    """Return what a user posted and the upvotes it earned."""
    user = _get_user_or_404(db, user_id)
    stats = user_service.user_stats(db, user)
    return DataResponse[UserStatsResponse](data=UserStatsResponse.model_validate(stats))


@router.get("/{user_id}/tags", response_model=DataResponse[list[UserTagUsage]])
async def get_user_top_tags(user_id: str, db: SessionDep) -> DataResponse[list[UserTagUsage]]:
    """Return the tags a user asks about most."""
    _get_user_or_404(db, user_id)
    usage = user_service.user_top_tags(db, user_id)
    return DataResponse[list[UserTagUsage]](
        data=[UserTagUsage(id=tag.id, name=tag.name, count=count) for tag, count in usage]
    )
