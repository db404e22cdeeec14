# src/devoverflow/services/toggles.py
"""Toggle protocols for votes and bookmarks.

A vote toggle moves one (voter, votable) pair between three states: no vote,
upvote and downvote. Repeating the current polarity retracts it; requesting
the opposite polarity deletes the existing row and creates a new one. Each
call runs as a single transaction so a failure never leaves the pair without
its original vote.

A bookmark toggle is plain set membership: present rows are removed and
absent rows are created.
"""

from __future__ import annotations

import logging
from typing import TypeAlias

from sqlalchemy.orm import Session

from devoverflow.db.session import atomic
from devoverflow.models import AnswerVote, QuestionVote, SavedQuestion
from devoverflow.models.vote import NO_VOTE, VOTE_DOWN, VOTE_UP

logger = logging.getLogger(__name__)

VoteModel: TypeAlias = type[QuestionVote] | type[AnswerVote]


def _find_vote(
    db: Session,
    model: VoteModel,
    target_id: str,
    voter_id: str,
) -> QuestionVote | AnswerVote | None:
    return db.query(model).filter(
        model.target_id == target_id,
        model.user_id == voter_id,
    ).first()


def current_vote(db: Session, model: VoteModel, target_id: str, voter_id: str) -> int:
    """Return the pair's state: ``1`` (up), ``-1`` (down) or ``0`` (none)."""
    vote = _find_vote(db, model, target_id, voter_id)
    if vote is None:
        return NO_VOTE
    return vote.direction


def toggle_vote(
    db: Session,
    model: VoteModel,
    target_id: str,
    voter_id: str,
    direction: int,
) -> int:
    """Apply one toggle of ``direction`` for the voter on the target.

    Args:
        db: Database session; the toggle commits or rolls back on it.
        model: ``QuestionVote`` or ``AnswerVote``.
        target_id: Identifier of the question or answer.
        voter_id: Identifier of the voting user.
        direction: ``1`` to toggle the upvote, ``-1`` to toggle the downvote.

    Returns:
        The resulting state of the pair.

    Raises:
        ValueError: If ``direction`` is not a polarity.
        sqlalchemy.exc.SQLAlchemyError: If the store rejects a write. The
            transaction is rolled back first.
    """
    if direction not in (VOTE_UP, VOTE_DOWN):
        raise ValueError(f"Unsupported vote direction: {direction!r}")

    with atomic(db):
        existing = _find_vote(db, model, target_id, voter_id)

        if existing is not None and existing.direction == direction:
            db.delete(existing)
            result = NO_VOTE
        else:
            if existing is not None:
                # Clear the opposite polarity before the new row takes the key.
                db.delete(existing)
                db.flush()
            db.add(model(target_id=target_id, user_id=voter_id, direction=direction))
            db.flush()
            result = direction

    logger.debug(
        "%s toggled by %s on %s: direction=%s result=%s",
        model.__name__,
        voter_id,
        target_id,
        direction,
        result,
    )
    return result


def is_bookmarked(db: Session, question_id: str, user_id: str) -> bool:
    """Return True when the user has bookmarked the question."""
    return db.query(SavedQuestion).filter(
        SavedQuestion.question_id == question_id,
        SavedQuestion.user_id == user_id,
    ).first() is not None


def toggle_bookmark(db: Session, question_id: str, user_id: str) -> bool:
    """Flip the user's bookmark on a question and return the new membership."""
    with atomic(db):
        bookmark = db.query(SavedQuestion).filter(
            SavedQuestion.question_id == question_id,
            SavedQuestion.user_id == user_id,
        ).first()

        if bookmark is not None:
            db.delete(bookmark)
            saved = False
        else:
            db.add(SavedQuestion(question_id=question_id, user_id=user_id))
            db.flush()
            saved = True

    logger.debug("Bookmark toggled by %s on %s: saved=%s", user_id, question_id, saved)
    return saved
