# src/devoverflow/models/bookmark.py
"""Bookmarks members keep on questions."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from devoverflow.db.session import Base
from devoverflow.db.time import utcnow


class SavedQuestion(Base):
    """Join table recording that a user bookmarked a question."""

    __tablename__ = "saved_question"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    question_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("question.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    # Presence implies membership; the timestamp only orders the bookmark list.
    saved_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
