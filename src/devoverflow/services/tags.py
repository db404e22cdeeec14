# src/devoverflow/services/tags.py
"""Tag listings."""
from __future__ import annotations

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session, undefer

from devoverflow.models import Question, QuestionTag, Tag

from .pagination import PageParams, contains_any, paginate
from .questions import summary_options


def list_tags(db: Session, params: PageParams) -> tuple[int, list[Tag]]:
    """Return ``(total, page)`` of tags.

    Orders: ``popular_tag`` (default), ``recent_tag``, ``old_tag``, ``name``.
    """
    query = db.query(Tag).options(undefer(Tag.question_count))

    if params.search_query:
        query = query.filter(contains_any(params.search_query, Tag.name))

    if params.filter == "recent_tag":
        query = query.order_by(desc(Tag.created_at))
    elif params.filter == "old_tag":
        query = query.order_by(asc(Tag.created_at))
    elif params.filter == "name":
        query = query.order_by(asc(Tag.name))
    else:
        query = query.order_by(desc(Tag.question_count), asc(Tag.name))

    return paginate(query, params)


def get_tag(db: Session, tag_id: str) -> Tag | None:
    """Return a tag by id."""
    return db.query(Tag).filter(Tag.id == tag_id).first()


def questions_by_tag(
    db: Session,
    tag_id: str,
    params: PageParams,
) -> tuple[int, list[Question]]:
    """Return ``(total, page)`` of questions carrying the tag, newest first."""
    query = (
        db.query(Question)
        .join(QuestionTag, QuestionTag.question_id == Question.id)
        .options(*summary_options())
        .filter(QuestionTag.tag_id == tag_id)
    )
    if params.search_query:
        query = query.filter(contains_any(params.search_query, Question.title, Question.content))

    query = query.order_by(desc(Question.created_at))
    return paginate(query, params)


def top_tags(db: Session, limit: int = 5) -> list[Tag]:
    """Return the tags attached to the most questions."""
    return (
        db.query(Tag)
        .options(undefer(Tag.question_count))
        .order_by(desc(Tag.question_count), asc(Tag.name))
        .limit(limit)
        .all()
    )
