"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)


class SignupRequest(BaseModel):
    """Schema for credential registration."""

    name: str = Field(..., min_length=3, max_length=100, description="Display name")
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    password_confirm: str = Field(..., min_length=8, max_length=72, alias="passwordConfirm")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _passwords_match(self) -> "SignupRequest":
        if self.password != self.password_confirm:
            raise ValueError("password and passwordConfirm do not match.")
        return self


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)


class ChangePasswordRequest(BaseModel):
    """Schema for replacing the current password."""

    old_password: str = Field(..., alias="oldPassword")
    new_password: str = Field(..., min_length=8, max_length=72, alias="newPassword")
    password_confirm: str = Field(..., alias="passwordConfirm")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _passwords_match(self) -> "ChangePasswordRequest":
        if self.new_password != self.password_confirm:
            raise ValueError("newPassword and passwordConfirm do not match.")
        return self


class UserSummary(BaseModel):
    """Compact author block embedded in questions and answers."""

    id: str
    name: str
    image: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """Full account view returned to the account owner."""

    id: str
    name: str
    username: str | None
    email: str
    image: str | None
    bio: str | None
    location: str | None
    portfolio_website: str | None
    reputation: int
    joined_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserProfileResponse(BaseModel):
    """Public profile with content counts."""

    id: str
    name: str
    username: str | None
    image: str | None
    bio: str | None
    location: str | None
    portfolio_website: str | None
    reputation: int
    joined_at: datetime
    question_count: int = 0
    answer_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Response returned after successful signup or login."""

    status: str = "success"
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type")
    user: UserResponse


class ProfileUpdateRequest(BaseModel):
    """Schema for updating profile information; omitted fields are untouched."""

    name: str | None = Field(None, min_length=3, max_length=100)
    username: str | None = Field(None, min_length=3, max_length=50)
    bio: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=100)
    portfolio_website: AnyHttpUrl | None = Field(None, alias="portfolioWebsite")
    image: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        """A name may be omitted but not cleared."""
        if v is None:
            raise ValueError("Name cannot be null")
        return v

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        """Usernames are handles: no whitespace."""
        if v is not None and any(ch.isspace() for ch in v):
            raise ValueError("Username must not contain whitespace")
        return v


class UserStatsResponse(BaseModel):
    """Activity totals for a user."""

    questions: int
    answers: int
    question_upvotes: int
    answer_upvotes: int
    reputation: int

    model_config = ConfigDict(from_attributes=True)


class UserTagUsage(BaseModel):
    """A tag and how many of the user's questions carry it."""

    id: str
    name: str
    count: int
