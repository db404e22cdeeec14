# src/devoverflow/models/interaction.py
"""Activity log feeding tag-based recommendations."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devoverflow.db.session import Base
from devoverflow.db.time import utcnow

from .ids import new_id

if TYPE_CHECKING:
    from .question import Tag

ACTION_QUESTION_CREATED = "question_created"
ACTION_ANSWER_CREATED = "answer_created"


class Interaction(Base):
    """A user action on a question, tagged with that question's tags."""

    __tablename__ = "interaction"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    question_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
    )
    answer_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("answer.id", ondelete="CASCADE"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    tags: Mapped[list[Tag]] = relationship("Tag", secondary="tag_interaction")


class TagInteraction(Base):
    """Join table linking an interaction to each tag it touched."""

    __tablename__ = "tag_interaction"

    interaction_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("interaction.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tag.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
