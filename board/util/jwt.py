"""Session token encoding.

Sessions are HS256 JWTs with registered claims only: ``sub`` carries the
user ID and ``name`` the display name.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field

from board.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp"]


class SessionClaims(BaseModel):
    """Decoded claims of a session token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="sub", min_length=1)
    username: str | None = Field(default=None, alias="name")
    issued_at: datetime | None = Field(default=None, alias="iat")
    expires_at: datetime = Field(alias="exp")


class SessionTokenError(Exception):
    """Token is malformed, forged, expired or missing a required claim."""


def encode_session_token(
    user_id: str,
    username: str | None,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Encode a session token valid for ``settings.jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    if username:
        claims["name"] = username

    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str, settings: AuthSettings) -> SessionClaims:
    """Decode and verify a session token.

    Raises:
        SessionTokenError: If the signature, expiry or claims are invalid
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise SessionTokenError("Session token has expired") from e
    except jwt.InvalidTokenError as e:
        raise SessionTokenError(f"Invalid session token: {e}") from e

    return SessionClaims.model_validate(claims)
