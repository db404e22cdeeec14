"""Shared API dependencies for authentication and common functionality."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Cookie, Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from devoverflow.core.security import decode_access_token
from devoverflow.core.settings import settings
from devoverflow.db.session import get_db
from devoverflow.models import User
from devoverflow.services.pagination import PageParams

# Bearer is optional because browsers authenticate with the session cookie.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    db: SessionDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_token: Annotated[str | None, Cookie(alias=settings.auth_cookie_name)] = None,
) -> User:
    """Get the current authenticated user from the bearer token or session cookie.

    Args:
        db: Database session
        credentials: HTTP Bearer token credentials, if sent
        auth_token: Session cookie value, if sent

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If no token is present, the token is invalid or the
            user no longer exists
    """
    token = credentials.credentials if credentials is not None else auth_token
    if not token:
        raise _credentials_error("Not authenticated")

    try:
        payload = decode_access_token(token)
    except JWTError as err:
        raise _credentials_error() from err

    subject = payload.get("sub")
    if subject is None:
        raise _credentials_error()

    user = db.query(User).filter(User.id == subject).first()
    if user is None:
        raise _credentials_error("User not found")
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def ensure_same_user(current_user: User, user_id: str) -> None:
    """Reject requests that act on behalf of another account."""
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only act on your own behalf",
        )


def pagination(default_page_size: int | None = None) -> Callable[..., PageParams]:
    """Build a dependency that reads page, pageSize, filter and searchQuery."""
    page_size_default = default_page_size or settings.default_page_size

    def _page_params(
        page: int = Query(1, ge=1, description="1-based page number"),
        page_size: int = Query(
            page_size_default,
            ge=1,
            le=settings.max_page_size,
            alias="pageSize",
        ),
        filter: str | None = Query(None, description="Ordering or subset selector"),
        search_query: str | None = Query(None, alias="searchQuery"),
    ) -> PageParams:
        return PageParams(
            page=page,
            page_size=page_size,
            filter=filter,
            search_query=search_query or None,
        )

    return _page_params


PageDep = Annotated[PageParams, Depends(pagination())]
