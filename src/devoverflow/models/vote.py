# src/devoverflow/models/vote.py
"""Models capturing voting interactions on questions and answers."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    SmallInteger,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, synonym

from devoverflow.db.session import Base
from devoverflow.db.time import utcnow

VOTE_UP = 1
VOTE_DOWN = -1
NO_VOTE = 0


class QuestionVote(Base):
    """Per-user vote on a question."""

    __tablename__ = "question_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_question_vote_direction"),
        Index("ix_question_vote_question_id", "question_id"),
    )

    question_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("question.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key: a voter holds at most one vote per question.

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    target_id = synonym("question_id")


class AnswerVote(Base):
    """Per-user vote on an answer."""

    __tablename__ = "answer_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_answer_vote_direction"),
        Index("ix_answer_vote_answer_id", "answer_id"),
    )

    answer_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("answer.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    target_id = synonym("answer_id")
