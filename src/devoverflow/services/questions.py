# src/devoverflow/services/questions.py
"""Question queries and mutations."""
from __future__ import annotations

import logging

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.orm import Session, selectinload

from devoverflow.core.settings import settings
from devoverflow.db.session import atomic
from devoverflow.models import Answer, Question, QuestionVote, SavedQuestion, Tag, User
from devoverflow.models.interaction import ACTION_QUESTION_CREATED
from devoverflow.models.vote import VOTE_UP

from .pagination import PageParams, contains_any, paginate
from .recommendations import record_interaction

logger = logging.getLogger(__name__)


def summary_options() -> tuple:
    """Loader options needed to render question summaries."""
    return (
        selectinload(Question.author),
        selectinload(Question.tags),
        selectinload(Question.votes),
        selectinload(Question.answers),
    )


def answer_count_column():
    """Correlated count of answers per question, usable in ORDER BY."""
    return (
        select(func.count(Answer.id))
        .where(Answer.question_id == Question.id)
        .correlate(Question)
        .scalar_subquery()
    )


def upvote_count_column():
    """Correlated count of upvotes per question, usable in ORDER BY."""
    return (
        select(func.count())
        .select_from(QuestionVote)
        .where(QuestionVote.question_id == Question.id, QuestionVote.direction == VOTE_UP)
        .correlate(Question)
        .scalar_subquery()
    )


def get_question(db: Session, question_id: str) -> Question | None:
    """Return a question by id without eager loading."""
    return db.query(Question).filter(Question.id == question_id).first()


def get_question_detail(db: Session, question_id: str) -> Question | None:
    """Return a question with author, tags, votes, bookmarks and answers loaded."""
    return (
        db.query(Question)
        .options(
            selectinload(Question.author),
            selectinload(Question.tags),
            selectinload(Question.votes),
            selectinload(Question.bookmarks),
            selectinload(Question.answers).selectinload(Answer.author),
            selectinload(Question.answers).selectinload(Answer.votes),
        )
        .filter(Question.id == question_id)
        .first()
    )


def resolve_tags(db: Session, names: list[str]) -> list[Tag]:
    """Find each tag by case-insensitive name, creating the missing ones."""
    tags: list[Tag] = []
    seen: set[str] = set()
    for raw in names:
        name = raw.strip()
        key = name.lower()
        if not name or key in seen:
            continue
        seen.add(key)

        tag = db.query(Tag).filter(func.lower(Tag.name) == key).first()
        if tag is None:
            tag = Tag(name=name)
            db.add(tag)
            db.flush()
        tags.append(tag)
    return tags


def create_question(
    db: Session,
    author: User,
    *,
    title: str,
    content: str,
    tags: list[str],
) -> Question:
    """Create a question with its tags in one transaction.

    The same transaction logs the author's interaction with every tag and
    credits the author's reputation.
    """
    with atomic(db):
        question = Question(title=title, content=content, author_id=author.id)
        question.tags = resolve_tags(db, tags)
        db.add(question)
        db.flush()

        record_interaction(
            db,
            user_id=author.id,
            action=ACTION_QUESTION_CREATED,
            question=question,
        )
        db.execute(
            update(User)
            .where(User.id == author.id)
            .values(reputation=User.reputation + settings.question_reputation_reward)
        )

    db.refresh(author)
    logger.info("Question %s created by %s with %d tags", question.id, author.id, len(question.tags))
    return question


def list_questions(db: Session, params: PageParams) -> tuple[int, list[Question]]:
    """Return ``(total, page)`` of questions for the public listing."""
    query = db.query(Question).options(*summary_options())

    if params.search_query:
        query = query.filter(contains_any(params.search_query, Question.title, Question.content))

    if params.filter == "frequent":
        query = query.order_by(desc(Question.views), desc(Question.created_at))
    elif params.filter == "unanswered":
        query = query.order_by(asc(answer_count_column()), desc(Question.created_at))
    else:
        query = query.order_by(desc(Question.created_at))

    return paginate(query, params)


def edit_question(
    db: Session,
    question: Question,
    *,
    title: str | None = None,
    content: str | None = None,
) -> Question:
    """Apply a partial update to a question's title and content."""
    with atomic(db):
        if title is not None:
            question.title = title
        if content is not None:
            question.content = content
    db.refresh(question)
    return question


def delete_question(db: Session, question: Question) -> None:
    """Delete a question together with its answers, votes and bookmarks."""
    question_id = question.id
    with atomic(db):
        db.delete(question)
    logger.info("Question %s deleted", question_id)


def increment_views(db: Session, question_id: str) -> bool:
    """Add one view to a question; return False when it does not exist."""
    with atomic(db):
        result = db.execute(
            update(Question)
            .where(Question.id == question_id)
            .values(views=Question.views + 1)
            .execution_options(synchronize_session=False)
        )
    return result.rowcount > 0


def top_questions(db: Session, limit: int = 5) -> list[Question]:
    """Return the most viewed questions, ties broken by upvotes."""
    return (
        db.query(Question)
        .options(selectinload(Question.votes))
        .order_by(desc(Question.views), desc(upvote_count_column()), desc(Question.created_at))
        .limit(limit)
        .all()
    )


def bookmarked_questions(
    db: Session,
    user_id: str,
    params: PageParams,
) -> tuple[int, list[Question]]:
    """Return ``(total, page)`` of questions the user has bookmarked."""
    query = (
        db.query(Question)
        .join(SavedQuestion, SavedQuestion.question_id == Question.id)
        .options(*summary_options())
        .filter(SavedQuestion.user_id == user_id)
    )

    if params.search_query:
        query = query.filter(contains_any(params.search_query, Question.title, Question.content))

    if params.filter == "oldest":
        query = query.order_by(asc(SavedQuestion.saved_at))
    else:
        query = query.order_by(desc(SavedQuestion.saved_at))

    return paginate(query, params)
