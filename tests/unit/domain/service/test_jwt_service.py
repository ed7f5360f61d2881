"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from board.config import AuthSettings
from board.domain.service import JWTService
from board.util.jwt import SessionTokenError

SECRET = "test-secret"


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret=SECRET))


class TestSessionTokens:
    """Tests for issuing and checking session tokens."""

    def test_issued_token_resolves_to_user(self, jwt_service):
        token = jwt_service.create_token("user-1", "alice")

        claims = jwt_service.decode_token(token)

        assert claims.user_id == "user-1"
        assert claims.username == "alice"
        assert jwt_service.authenticated_user_id(token) == "user-1"

    def test_user_id_is_the_sub_claim(self, jwt_service):
        token = jwt_service.create_token("user-1")

        raw = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert raw["sub"] == "user-1"
        assert "name" not in raw

    def test_expired_token_is_rejected(self, jwt_service):
        long_ago = datetime.now(timezone.utc) - timedelta(days=365)
        token = jwt_service.create_token("user-1", now=long_ago)

        with pytest.raises(SessionTokenError, match="expired"):
            jwt_service.decode_token(token)
        assert jwt_service.authenticated_user_id(token) is None

    def test_token_signed_with_another_secret_is_rejected(self, jwt_service):
        forged = JWTService(AuthSettings(jwt_secret="other")).create_token("user-1")

        assert jwt_service.authenticated_user_id(forged) is None

    def test_token_without_subject_is_rejected(self, jwt_service):
        expiry = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode({"exp": expiry}, SECRET, algorithm="HS256")

        with pytest.raises(SessionTokenError):
            jwt_service.decode_token(token)

    def test_token_with_empty_subject_is_rejected(self, jwt_service):
        expiry = datetime.now(timezone.utc) + timedelta(days=1)
        token = jwt.encode({"sub": "", "exp": expiry}, SECRET, algorithm="HS256")

        assert jwt_service.authenticated_user_id(token) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, jwt_service, token):
        assert jwt_service.authenticated_user_id(token) is None
