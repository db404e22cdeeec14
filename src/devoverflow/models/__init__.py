"""SQLAlchemy models for the DevOverflow application."""

from .answer import Answer
from .bookmark import SavedQuestion
from .interaction import Interaction, TagInteraction
from .question import Question, QuestionTag, Tag
from .user import User
from .vote import AnswerVote, QuestionVote

__all__ = [
    "Answer",
    "SavedQuestion",
    "Interaction", "TagInteraction",
    "Question", "QuestionTag", "Tag",
    "User",
    "AnswerVote", "QuestionVote",
]
