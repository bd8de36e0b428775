"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from lingo.config import AuthSettings
from lingo.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret")


class TestJWT:
    """Tests for create_token and verify_token."""

    def test_round_trip(self, auth_settings):
        """A freshly issued token verifies to the same claims."""
        token = create_token("user-1", "kai@example.com", auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.sub == "user-1"
        assert payload.email == "kai@example.com"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_is_rejected(self, auth_settings):
        token = create_token("user-1", "kai@example.com", auth_settings)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_token_is_rejected(self, auth_settings):
        token = jwt.encode(
            {
                "sub": "user-1",
                "email": "kai@example.com",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_missing_email_is_rejected(self, auth_settings):
        token = jwt.encode(
            {"sub": "user-1", "exp": datetime.now(timezone.utc) + timedelta(days=1)},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="email"):
            verify_token(token, auth_settings)
