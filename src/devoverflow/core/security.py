"""Password hashing and session token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import jwt

from devoverflow.core.settings import settings


def hash_password(password: str) -> str:
    """Return a bcrypt hash of the provided password."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: str,
    *,
    name: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed session token carrying the user's id, name and email.

    Args:
        user_id: Identifier stored as the ``sub`` claim.
        name: Display name of the user.
        email: Email address of the user.
        expires_delta: Optional lifetime override.

    Returns:
        Encoded JWT string.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(UTC) + expires_delta
    claims = {"sub": user_id, "name": name, "email": email, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and verify a session token.

    Raises:
        jose.JWTError: If the signature or expiry is invalid.
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
