# src/devoverflow/services/recommendations.py
"""Tag-interaction recommendations.

Asking or answering a question logs an interaction tagged with every tag on
that question. Recommendations are a filter over those tags: questions that
share at least one tag the user has touched, excluding the user's own. Users
with no history (and no search text) get recently created, widely viewed
questions instead. Nothing is scored or ranked beyond recency.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy import desc, select
from sqlalchemy.orm import Session, selectinload

from devoverflow.core.settings import settings
from devoverflow.db.time import utcnow
from devoverflow.models import Interaction, Question, QuestionTag, TagInteraction

from .pagination import PageParams, contains_any, paginate

logger = logging.getLogger(__name__)


def record_interaction(
    db: Session,
    *,
    user_id: str,
    action: str,
    question: Question,
    answer_id: str | None = None,
) -> Interaction:
    """Log an action on ``question`` tagged with the question's tags.

    Runs inside the caller's transaction; nothing is committed here.
    """
    interaction = Interaction(
        user_id=user_id,
        action=action,
        question_id=question.id,
        answer_id=answer_id,
    )
    interaction.tags = list(question.tags)
    db.add(interaction)
    db.flush()
    return interaction


def interacted_tag_ids(db: Session, user_id: str) -> set[str]:
    """Return the distinct tag ids across all of the user's interactions."""
    rows = (
        db.query(TagInteraction.tag_id)
        .join(Interaction, Interaction.id == TagInteraction.interaction_id)
        .filter(Interaction.user_id == user_id)
        .distinct()
        .all()
    )
    return {row.tag_id for row in rows}


def recommended_questions(
    db: Session,
    user_id: str,
    params: PageParams,
    *,
    now: datetime | None = None,
) -> tuple[int, list[Question]]:
    """Return ``(total, page)`` of questions recommended for ``user_id``.

    Args:
        db: Database session.
        user_id: The requesting user; their own questions are never returned.
        params: Page, page size and optional search text.
        now: Reference time for the trending fallback window.
    """
    tag_ids = interacted_tag_ids(db, user_id)

    query = db.query(Question).options(
        selectinload(Question.author),
        selectinload(Question.tags),
        selectinload(Question.votes),
        selectinload(Question.answers),
    ).filter(Question.author_id != user_id)

    if tag_ids:
        tagged = select(QuestionTag.question_id).where(QuestionTag.tag_id.in_(tag_ids))
        query = query.filter(Question.id.in_(tagged))

    if params.search_query:
        query = query.filter(contains_any(params.search_query, Question.title, Question.content))

    if not tag_ids and not params.search_query:
        since = (now or utcnow()) - timedelta(days=settings.trending_window_days)
        query = query.filter(
            Question.views >= settings.trending_min_views,
            Question.created_at >= since,
        )
        logger.debug("No tag history for %s; using trending fallback since %s", user_id, since)

    query = query.order_by(desc(Question.created_at))
    return paginate(query, params)
