"""JWT token utilities.

Tokens are issued by the external identity provider. This module verifies them
and, for development tooling and tests, can mint tokens signed with the shared
secret.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from blog.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    role: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, role: str, settings: AuthSettings, expires_in_days: int = 1
) -> str:
    """Create a JWT token for a user.

    Args:
        user_id: User ID
        role: Role name ("user" or "admin")
        settings: Authentication settings
        expires_in_days: Token lifetime

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=expires_in_days)

    payload = {
        "user_id": user_id,
        "role": role,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
