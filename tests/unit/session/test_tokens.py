"""Tests for session token issuing and verification."""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from mesto.core.modules.session.tokens import ALGORITHM, TokenService
from mesto.errors import AuthenticationError, InvalidTokenError
from mesto.utils import now


class TestIssue:
    """Tests for token issuing."""

    def test_round_trip(self, tokens):
        """Test that verify returns the id the token was issued for."""
        user_id = uuid4()
        issued = tokens.issue(user_id)
        assert tokens.verify(issued.token) == user_id

    def test_lifetime_is_seven_days(self, tokens):
        """Test default lifetime and cookie max-age."""
        issued_at = now()
        issued = tokens.issue(uuid4(), now=issued_at)
        assert issued.max_age == 7 * 24 * 60 * 60
        assert issued.expires_at == issued_at + timedelta(days=7)

    def test_custom_lifetime(self):
        service = TokenService("secret", lifetime=timedelta(hours=1))
        assert service.issue(uuid4()).max_age == 3600

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            TokenService("")


class TestVerify:
    """Tests for rejecting bad tokens."""

    def test_expired_token(self, tokens):
        """Test that a token issued more than a lifetime ago is rejected."""
        issued = tokens.issue(uuid4(), now=now() - timedelta(days=8))
        with pytest.raises(InvalidTokenError):
            tokens.verify(issued.token)

    def test_token_still_valid_before_expiry(self, tokens):
        user_id = uuid4()
        issued = tokens.issue(user_id, now=now() - timedelta(days=6))
        assert tokens.verify(issued.token) == user_id

    def test_foreign_secret(self, tokens):
        """Test that a token signed with another secret is rejected."""
        issued = TokenService("another-secret").issue(uuid4())
        with pytest.raises(InvalidTokenError):
            tokens.verify(issued.token)

    def test_tampered_payload(self, tokens):
        header, _payload, signature = tokens.issue(uuid4()).token.split(".")
        forged = jwt.encode({"sub": str(uuid4()), "exp": now() + timedelta(days=1)}, "x", algorithm=ALGORITHM)
        with pytest.raises(InvalidTokenError):
            tokens.verify(".".join([header, forged.split(".")[1], signature]))

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", "a.b"])
    def test_malformed_token(self, tokens, token):
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_missing_expiry(self, tokens):
        """Test that tokens without exp are not trusted."""
        token = jwt.encode({"sub": str(uuid4())}, "test-secret-key", algorithm=ALGORITHM)
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_subject_not_a_uuid(self, tokens):
        token = jwt.encode({"sub": "admin", "exp": now() + timedelta(days=1)}, "test-secret-key", algorithm=ALGORITHM)
        with pytest.raises(InvalidTokenError):
            tokens.verify(token)

    def test_invalid_token_is_authentication_error(self, tokens):
        """Test that token failures surface as 401."""
        with pytest.raises(AuthenticationError) as exc_info:
            tokens.verify("garbage")
        assert exc_info.value.status_code == 401
