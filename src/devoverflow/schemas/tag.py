"""Tag-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .question import QuestionSummary, TagSummary


class TagResponse(BaseModel):
    """Tag with the number of questions using it."""

    id: str
    name: str
    description: str | None
    created_at: datetime
    question_count: int

    model_config = ConfigDict(from_attributes=True)


class TagQuestions(BaseModel):
    """A tag together with one page of its questions."""

    tag: TagSummary
    questions_count: int
    questions: list[QuestionSummary]
