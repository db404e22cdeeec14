"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .answer import AnswerCreate, AnswerResponse, AnswerUpdate
from .common import DataResponse, ListResponse, MessageResponse
from .question import (
    QuestionCreate,
    QuestionDetail,
    QuestionResponse,
    QuestionSummary,
    QuestionUpdate,
    TagSummary,
    TopQuestion,
)
from .search import SearchResult
from .tag import TagQuestions, TagResponse
from .user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileUpdateRequest,
    SignupRequest,
    UserProfileResponse,
    UserResponse,
    UserStatsResponse,
    UserSummary,
    UserTagUsage,
)
from .vote import AnswerToggle, MyVoteResponse, QuestionToggle

__all__ = [
    "AnswerCreate", "AnswerResponse", "AnswerUpdate",
    "DataResponse", "ListResponse", "MessageResponse",
    "QuestionCreate", "QuestionDetail", "QuestionResponse", "QuestionSummary",
    "QuestionUpdate", "TagSummary", "TopQuestion",
    "SearchResult",
    "TagQuestions", "TagResponse",
    "ChangePasswordRequest", "LoginRequest", "LoginResponse", "ProfileUpdateRequest",
    "SignupRequest", "UserProfileResponse", "UserResponse", "UserStatsResponse",
    "UserSummary", "UserTagUsage",
    "AnswerToggle", "MyVoteResponse", "QuestionToggle",
]
