"""Answer-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummary


class AnswerCreate(BaseModel):
    """Schema for answering a question."""

    question_id: str = Field(..., alias="questionId")
    content: str = Field(..., min_length=1, description="Markdown body")

    model_config = ConfigDict(populate_by_name=True)


class AnswerUpdate(BaseModel):
    """Schema for editing an answer."""

    content: str = Field(..., min_length=1)


class AnswerResponse(BaseModel):
    """Answer with derived vote totals."""

    id: str
    content: str
    question_id: str
    author: UserSummary
    created_at: datetime
    upvote_count: int
    downvote_count: int
    upvoter_ids: list[str]
    downvoter_ids: list[str]

    model_config = ConfigDict(from_attributes=True)
