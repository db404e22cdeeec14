# src/devoverflow/models/question.py
"""SQLAlchemy models for questions and the tags attached to them."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func, select
from sqlalchemy.orm import Mapped, column_property, mapped_column, relationship

from devoverflow.db.session import Base
from devoverflow.db.time import utcnow

from .ids import new_id
from .vote import VOTE_DOWN, VOTE_UP

if TYPE_CHECKING:
    from .answer import Answer
    from .bookmark import SavedQuestion
    from .interaction import Interaction
    from .user import User
    from .vote import QuestionVote


class Question(Base):
    """A question asked by a member; one of the two votable entities."""

    __tablename__ = "question"
    __table_args__ = (Index("ix_question_created_at", "created_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    author: Mapped[User] = relationship("User", back_populates="questions")
    tags: Mapped[list[Tag]] = relationship(
        "Tag",
        secondary="question_tag",
        back_populates="questions",
        order_by="Tag.name",
    )
    answers: Mapped[list[Answer]] = relationship(
        "Answer",
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Answer.created_at",
    )
    votes: Mapped[list[QuestionVote]] = relationship(
        "QuestionVote",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    bookmarks: Mapped[list[SavedQuestion]] = relationship(
        "SavedQuestion",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    interactions: Mapped[list[Interaction]] = relationship(
        "Interaction",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Vote totals are counted from the vote rows, never stored.
    @property
    def upvote_count(self) -> int:
        return sum(1 for vote in self.votes if vote.direction == VOTE_UP)

    @property
    def downvote_count(self) -> int:
        return sum(1 for vote in self.votes if vote.direction == VOTE_DOWN)

    @property
    def answer_count(self) -> int:
        return len(self.answers)

    @property
    def upvoter_ids(self) -> list[str]:
        return [vote.user_id for vote in self.votes if vote.direction == VOTE_UP]

    @property
    def downvoter_ids(self) -> list[str]:
        return [vote.user_id for vote in self.votes if vote.direction == VOTE_DOWN]

    @property
    def bookmarked_by(self) -> list[str]:
        return [bookmark.user_id for bookmark in self.bookmarks]


class Tag(Base):
    """Topic label; names are unique regardless of letter case."""

    __tablename__ = "tag"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    questions: Mapped[list[Question]] = relationship(
        "Question",
        secondary="question_tag",
        back_populates="tags",
    )


class QuestionTag(Base):
    """Join table attaching tags to questions."""

    __tablename__ = "question_tag"

    question_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("question.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )


# Counted in SQL; only loaded where a query asks for it with ``undefer``.
Tag.question_count = column_property(
    select(func.count())
    .select_from(QuestionTag)
    .where(QuestionTag.tag_id == Tag.id)
    .correlate_except(QuestionTag)
    .scalar_subquery(),
    deferred=True,
)
