"""Session token domain service."""

from datetime import datetime

import logfire
from pydantic import ValidationError

from board.config import AuthSettings
from board.domain.value import UserId
from board.util.jwt import (
    SessionClaims,
    SessionTokenError,
    decode_session_token,
    encode_session_token,
)

from .base import Service


class JWTService(Service):
    """Issues and checks the session tokens sent as ``auth_token``."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(
        self,
        user_id: str,
        username: str | None = None,
        now: datetime | None = None,
    ) -> str:
        """Issue a session token for ``user_id``."""
        return encode_session_token(user_id, username, self.auth_settings, now=now)

    def decode_token(self, token: str) -> SessionClaims:
        """Decode a session token.

        Raises:
            SessionTokenError: If the token is not a valid session
        """
        try:
            return decode_session_token(token, self.auth_settings)
        except ValidationError as e:
            raise SessionTokenError(f"Malformed session claims: {e}") from e

    def authenticated_user_id(self, token: str | None) -> UserId | None:
        """User ID of a valid session, None for a missing or rejected token."""
        if not token:
            return None

        try:
            claims = self.decode_token(token)
        except SessionTokenError as e:
            logfire.info("Session token rejected", reason=str(e))
            return None

        return UserId(claims.user_id)
