"""Vote and bookmark toggle schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class QuestionToggle(BaseModel):
    """Body of the question upvote/downvote/bookmark toggles."""

    user_id: str = Field(..., alias="userId")
    question_id: str = Field(..., alias="questionId")

    model_config = ConfigDict(populate_by_name=True)


class AnswerToggle(BaseModel):
    """Body of the answer upvote/downvote toggles."""

    user_id: str = Field(..., alias="userId")
    answer_id: str = Field(..., alias="questionAnsweredId")

    model_config = ConfigDict(populate_by_name=True)


class MyVoteResponse(BaseModel):
    """Caller's current state on a votable."""

    direction: Literal[-1, 0, 1] = Field(..., description="1 up, -1 down, 0 none")
