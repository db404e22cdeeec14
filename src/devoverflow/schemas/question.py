"""Question-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .answer import AnswerResponse
from .user import UserSummary


class TagSummary(BaseModel):
    """Tag reference embedded in question payloads."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


def _clean_title(title: str) -> str:
    """Trim surrounding whitespace; a blank title is rejected."""
    cleaned = title.strip()
    if not cleaned:
        raise ValueError("Title must not be blank")
    return cleaned


class QuestionCreate(BaseModel):
    """Schema for asking a new question."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=20, description="Markdown body")
    tags: list[str] = Field(..., min_length=1, max_length=5)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _clean_title(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Each tag name must be 1-15 characters once trimmed."""
        cleaned = [tag.strip() for tag in v]
        for tag in cleaned:
            if not 1 <= len(tag) <= 15:
                raise ValueError("Each tag must be between 1 and 15 characters")
        return cleaned


class QuestionUpdate(BaseModel):
    """Schema for editing a question; omitted fields are untouched."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=20)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return None if v is None else _clean_title(v)


class QuestionSummary(BaseModel):
    """Question card shown in listings."""

    id: str
    title: str
    views: int
    created_at: datetime
    author: UserSummary
    tags: list[TagSummary]
    upvote_count: int
    answer_count: int

    model_config = ConfigDict(from_attributes=True)


class QuestionResponse(BaseModel):
    """Question as returned right after creation or edit."""

    id: str
    title: str
    content: str
    views: int
    author_id: str
    created_at: datetime
    updated_at: datetime
    tags: list[TagSummary]

    model_config = ConfigDict(from_attributes=True)


class QuestionDetail(QuestionResponse):
    """Full question page including answers and voter ids."""

    author: UserSummary
    upvote_count: int
    downvote_count: int
    upvoter_ids: list[str]
    downvoter_ids: list[str]
    bookmarked_by: list[str]
    answers: list[AnswerResponse]


class TopQuestion(BaseModel):
    """Entry in the most-viewed question list."""

    id: str
    title: str
    views: int
    upvote_count: int

    model_config = ConfigDict(from_attributes=True)
