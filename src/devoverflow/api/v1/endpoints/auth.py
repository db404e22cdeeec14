# src/devoverflow/api/v1/endpoints/auth.py
"""Authentication endpoints for the DevOverflow API."""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from devoverflow.api.v1.dependencies import CurrentUserDep, SessionDep
from devoverflow.core.security import create_access_token, verify_password
from devoverflow.core.settings import settings
from devoverflow.models import User
from devoverflow.schemas.common import MessageResponse
from devoverflow.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserResponse,
)
from devoverflow.services.users import create_user, get_user_by_email, set_password

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _issue_session(response: Response, user: User) -> LoginResponse:
    token = create_access_token(user.id, name=user.name, email=user.email)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return LoginResponse(
        access_token=token,
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/signup",
    summary="Register with email and password",
    status_code=status.HTTP_201_CREATED,
    response_model=LoginResponse,
)
async def signup(payload: SignupRequest, response: Response, db: SessionDep) -> LoginResponse:
    """Create an account and start a session for it."""
    if get_user_by_email(db, payload.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An account with this email already exists",
        )

    user = create_user(db, name=payload.name, email=payload.email, password=payload.password)
    logger.info("User %s signed up", user.id)
    return _issue_session(response, user)


@router.post("/login", summary="Log in with email and password", response_model=LoginResponse)
async def login(payload: LoginRequest, response: Response, db: SessionDep) -> LoginResponse:
    """Verify credentials and return a session token."""
    user = get_user_by_email(db, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )
    return _issue_session(response, user)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Clear the session cookie."""
    response.delete_cookie(
        key=settings.auth_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return MessageResponse(message="Logged out successfully")


@router.patch("/password", response_model=MessageResponse)
async def change_password(
    payload: ChangePasswordRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Replace the caller's password after checking the current one."""
    if not verify_password(payload.old_password, current_user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
        )
    set_password(db, current_user, payload.new_password)
    logger.info("User %s changed password", current_user.id)
    return MessageResponse(message="Password updated successfully")


@router.get("/me", response_model=UserResponse)
async def read_me(current_user: CurrentUserDep) -> User:
    """Return the authenticated user's account."""
    return current_user
