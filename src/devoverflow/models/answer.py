# src/devoverflow/models/answer.py
"""SQLAlchemy model for answers to questions."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devoverflow.db.session import Base
from devoverflow.db.time import utcnow

from .ids import new_id
from .vote import VOTE_DOWN, VOTE_UP

if TYPE_CHECKING:
    from .interaction import Interaction
    from .question import Question
    from .user import User
    from .vote import AnswerVote


class Answer(Base):
    """A reply to a question; the second votable entity."""

    __tablename__ = "answer"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
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

    question: Mapped[Question] = relationship("Question", back_populates="answers")
    author: Mapped[User] = relationship("User", back_populates="answers")
    votes: Mapped[list[AnswerVote]] = relationship(
        "AnswerVote",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    interactions: Mapped[list[Interaction]] = relationship(
        "Interaction",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def upvote_count(self) -> int:
        return sum(1 for vote in self.votes if vote.direction == VOTE_UP)

    @property
    def downvote_count(self) -> int:
        return sum(1 for vote in self.votes if vote.direction == VOTE_DOWN)

    @property
    def upvoter_ids(self) -> list[str]:
        return [vote.user_id for vote in self.votes if vote.direction == VOTE_UP]

    @property
    def downvoter_ids(self) -> list[str]:
        return [vote.user_id for vote in self.votes if vote.direction == VOTE_DOWN]
