# src/devoverflow/services/answers.py
"""Answer queries and mutations."""
from __future__ import annotations

import logging

from sqlalchemy import asc, desc, func, select
from sqlalchemy.orm import Session, selectinload

from devoverflow.db.session import atomic
from devoverflow.models import Answer, AnswerVote, Question, User
from devoverflow.models.interaction import ACTION_ANSWER_CREATED
from devoverflow.models.vote import VOTE_DOWN, VOTE_UP

from .recommendations import record_interaction

logger = logging.getLogger(__name__)


def _vote_count_column(direction: int):
    return (
        select(func.count())
        .select_from(AnswerVote)
        .where(AnswerVote.answer_id == Answer.id, AnswerVote.direction == direction)
        .correlate(Answer)
        .scalar_subquery()
    )


def get_answer(db: Session, answer_id: str) -> Answer | None:
    """Return an answer with its author and votes loaded."""
    return (
        db.query(Answer)
        .options(selectinload(Answer.author), selectinload(Answer.votes))
        .filter(Answer.id == answer_id)
        .first()
    )


def create_answer(db: Session, author: User, question: Question, content: str) -> Answer:
    """Post an answer and log the author's interaction with the question's tags."""
    with atomic(db):
        answer = Answer(content=content, question_id=question.id, author_id=author.id)
        db.add(answer)
        db.flush()
        record_interaction(
            db,
            user_id=author.id,
            action=ACTION_ANSWER_CREATED,
            question=question,
            answer_id=answer.id,
        )
    logger.info("Answer %s posted on question %s by %s", answer.id, question.id, author.id)
    return answer


def list_answers(db: Session, question_id: str, sort: str | None = None) -> list[Answer]:
    """Return every answer of a question in the requested order.

    Orders: ``highest-upvotes``, ``lowest-upvotes`` (most downvoted first),
    ``most-recent`` and ``oldest`` (default).
    """
    query = (
        db.query(Answer)
        .options(selectinload(Answer.author), selectinload(Answer.votes))
        .filter(Answer.question_id == question_id)
    )

    if sort == "highest-upvotes":
        query = query.order_by(desc(_vote_count_column(VOTE_UP)), asc(Answer.created_at))
    elif sort == "lowest-upvotes":
        query = query.order_by(desc(_vote_count_column(VOTE_DOWN)), asc(Answer.created_at))
    elif sort == "most-recent":
        query = query.order_by(desc(Answer.created_at))
    else:
        query = query.order_by(asc(Answer.created_at))

    return query.all()


def edit_answer(db: Session, answer: Answer, content: str) -> Answer:
    """Replace the body of an answer."""
    with atomic(db):
        answer.content = content
    db.refresh(answer)
    return answer


def delete_answer(db: Session, answer: Answer) -> None:
    """Delete an answer and its votes."""
    with atomic(db):
        db.delete(answer)
