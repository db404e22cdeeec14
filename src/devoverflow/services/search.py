# src/devoverflow/services/search.py
"""Global search across questions, users, answers and tags."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session, selectinload

from devoverflow.models import Answer, Question, Tag, User

from .pagination import contains_any

SEARCH_TYPES = ("question", "user", "answer", "tag")
PER_TYPE_LIMIT = 2
SINGLE_TYPE_LIMIT = 8


@dataclass(frozen=True)
class SearchHit:
    """One search result; answers point at their question."""

    title: str
    id: str
    type: str


def _questions(db: Session, query: str, limit: int) -> list[SearchHit]:
    rows = db.query(Question).filter(contains_any(query, Question.title)).limit(limit).all()
    return [SearchHit(title=row.title, id=row.id, type="question") for row in rows]


def _users(db: Session, query: str, limit: int) -> list[SearchHit]:
    rows = db.query(User).filter(contains_any(query, User.name)).limit(limit).all()
    return [SearchHit(title=row.name, id=row.id, type="user") for row in rows]


def _answers(db: Session, query: str, limit: int) -> list[SearchHit]:
    rows = (
        db.query(Answer)
        .options(selectinload(Answer.question))
        .filter(contains_any(query, Answer.content))
        .limit(limit)
        .all()
    )
    return [
        SearchHit(
            title=f'Answer containing "{query}" from question: {row.question.title}',
            id=row.question_id,
            type="answer",
        )
        for row in rows
    ]


def _tags(db: Session, query: str, limit: int) -> list[SearchHit]:
    rows = db.query(Tag).filter(contains_any(query, Tag.name)).limit(limit).all()
    return [SearchHit(title=row.name, id=row.id, type="tag") for row in rows]


_SEARCHERS = {
    "question": _questions,
    "user": _users,
    "answer": _answers,
    "tag": _tags,
}


def global_search(db: Session, query: str, search_type: str | None = None) -> list[SearchHit]:
    """Search one kind of entity, or all of them when ``search_type`` is unknown.

    A recognised type returns up to eight hits of that kind. Anything else
    returns up to two hits per kind, in question/user/answer/tag order.
    """
    kind = (search_type or "").lower()
    if kind in _SEARCHERS:
        return _SEARCHERS[kind](db, query, SINGLE_TYPE_LIMIT)

    hits: list[SearchHit] = []
    for name in SEARCH_TYPES:
        hits.extend(_SEARCHERS[name](db, query, PER_TYPE_LIMIT))
    return hits
