# src/devoverflow/services/users.py
"""CRUD-style helpers for managing members and their activity."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session

from devoverflow.core.security import hash_password
from devoverflow.db.session import atomic
from devoverflow.models import Answer, AnswerVote, Question, QuestionTag, QuestionVote, Tag, User
from devoverflow.models.vote import VOTE_UP

from .pagination import PageParams, contains_any, paginate
from .questions import summary_options

__all__ = [
    "UserStats",
    "get_user",
    "get_user_by_email",
    "create_user",
    "list_users",
    "update_user",
    "set_password",
    "count_user_content",
    "user_questions",
    "user_stats",
    "user_top_tags",
]


@dataclass(frozen=True)
class UserStats:
    """Activity totals for a user profile page."""

    questions: int
    answers: int
    question_upvotes: int
    answer_upvotes: int
    reputation: int


def get_user(db: Session, user_id: str) -> User | None:
    """Return a single user by primary key."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Return a user by email, ignoring letter case."""
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def create_user(db: Session, *, name: str, email: str, password: str) -> User:
    """Persist a new user with a hashed password."""
    with atomic(db):
        user = User(name=name, email=email.lower(), password_hash=hash_password(password))
        db.add(user)
        db.flush()
    db.refresh(user)
    return user


def _authored_count(model: Any) -> Any:
    return (
        select(func.count())
        .select_from(model)
        .where(model.author_id == User.id)
        .correlate(User)
        .scalar_subquery()
    )


def list_users(db: Session, params: PageParams) -> tuple[int, list[tuple[User, int, int]]]:
    """Return ``(total, page)`` where each row is ``(user, questions, answers)``.

    Orders: ``new_users`` (default), ``old_users``, ``top_contributors``.
    """
    query = db.query(
        User,
        _authored_count(Question).label("question_count"),
        _authored_count(Answer).label("answer_count"),
    )

    if params.search_query:
        query = query.filter(contains_any(params.search_query, User.name, User.username))

    if params.filter == "old_users":
        query = query.order_by(asc(User.joined_at))
    elif params.filter == "top_contributors":
        query = query.order_by(desc(User.reputation), asc(User.joined_at))
    else:
        query = query.order_by(desc(User.joined_at))

    total, rows = paginate(query, params)
    return total, [(user, questions, answers) for user, questions, answers in rows]


def update_user(db: Session, db_user: User, update_data: dict[str, Any]) -> User:
    """Apply partial updates to an existing user."""
    with atomic(db):
        for key, value in update_data.items():
            setattr(db_user, key, value)
        db.add(db_user)
    db.refresh(db_user)
    return db_user


def set_password(db: Session, db_user: User, password: str) -> None:
    """Replace the user's password hash."""
    with atomic(db):
        db_user.password_hash = hash_password(password)


def count_user_content(db: Session, user_id: str) -> tuple[int, int]:
    """Return how many questions and answers the user has posted."""
    questions = (
        db.query(func.count()).select_from(Question).filter(Question.author_id == user_id).scalar()
        or 0
    )
    answers = (
        db.query(func.count()).select_from(Answer).filter(Answer.author_id == user_id).scalar()
        or 0
    )
    return questions, answers


def user_questions(db: Session, user_id: str, params: PageParams) -> tuple[int, list[Question]]:
    """Return ``(total, page)`` of the user's questions, most viewed first."""
    query = (
        db.query(Question)
        .options(*summary_options())
        .filter(Question.author_id == user_id)
        .order_by(desc(Question.views), desc(Question.created_at))
    )
    return paginate(query, params)


def user_stats(db: Session, user: User) -> UserStats:
    """Count what the user posted and the upvotes their posts received."""
    questions, answers = count_user_content(db, user.id)
    question_upvotes = (
        db.query(func.count())
        .select_from(QuestionVote)
        .join(Question, Question.id == QuestionVote.question_id)
        .filter(Question.author_id == user.id, QuestionVote.direction == VOTE_UP)
        .scalar()
        or 0
    )
    answer_upvotes = (
        db.query(func.count())
        .select_from(AnswerVote)
        .join(Answer, Answer.id == AnswerVote.answer_id)
        .filter(Answer.author_id == user.id, AnswerVote.direction == VOTE_UP)
        .scalar()
        or 0
    )
    return UserStats(
        questions=questions,
        answers=answers,
        question_upvotes=question_upvotes,
        answer_upvotes=answer_upvotes,
        reputation=user.reputation,
    )


def user_top_tags(db: Session, user_id: str, limit: int = 5) -> list[tuple[Tag, int]]:
    """Return the tags the user asks about most, with usage counts."""
    usage = func.count(QuestionTag.question_id).label("usage")
    rows = (
        db.query(Tag, usage)
        .join(QuestionTag, QuestionTag.tag_id == Tag.id)
        .join(Question, Question.id == QuestionTag.question_id)
        .filter(Question.author_id == user_id)
        .group_by(Tag.id)
        .order_by(desc(usage), asc(Tag.name))
        .limit(limit)
        .all()
    )
    return [(row[0], int(row[1])) for row in rows]
