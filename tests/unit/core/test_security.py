"""
Tests for access token verification.

Tests:
- Valid, expired and tampered tokens
- Audience and required claims
- Admin email list
"""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from core.security import (
    AuthenticationError,
    Identity,
    TokenExpiredError,
    TokenInvalidError,
    is_listed_admin,
    verify_jwt_token,
)

SECRET = "unit-test-secret-that-is-long-enough-32"


def encode(claims, secret=SECRET):
    return pyjwt.encode(claims, secret, algorithm="HS256")


def claims(**overrides):
    data = {
        "sub": "employer-1",
        "email": "hr@example.com",
        "role": "authenticated",
        "aud": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


class TestVerifyJwtToken:
    """Test token verification."""

    def test_valid_token(self):
        """Test a valid token yields the identity."""
        identity = verify_jwt_token(encode(claims()), SECRET)

        assert identity == Identity(id="employer-1", email="hr@example.com", role="authenticated")

    def test_expired_token(self):
        """Test an expired token is rejected."""
        token = encode(claims(exp=datetime.now(timezone.utc) - timedelta(minutes=1)))

        with pytest.raises(TokenExpiredError):
            verify_jwt_token(token, SECRET)

    def test_wrong_secret(self):
        """Test a token signed with another secret is rejected."""
        token = encode(claims(), secret="another-secret-that-is-long-enough-32")

        with pytest.raises(TokenInvalidError):
            verify_jwt_token(token, SECRET)

    def test_wrong_audience(self):
        """Test the audience claim is checked."""
        with pytest.raises(TokenInvalidError):
            verify_jwt_token(encode(claims(aud="anon")), SECRET)

    def test_audience_check_disabled(self):
        """Test the audience check can be skipped."""
        identity = verify_jwt_token(encode(claims(aud="anon")), SECRET, audience=None)
        assert identity.id == "employer-1"

    @pytest.mark.parametrize("missing", ["sub", "exp"])
    def test_required_claims(self, missing):
        """Test tokens without subject or expiry are rejected."""
        with pytest.raises(TokenInvalidError):
            verify_jwt_token(encode(claims(**{missing: None})), SECRET)

    def test_garbage_token(self):
        """Test a malformed token is rejected."""
        with pytest.raises(TokenInvalidError):
            verify_jwt_token("not.a.token", SECRET)

    def test_errors_share_base(self):
        """Test both failures are authentication errors."""
        assert issubclass(TokenExpiredError, AuthenticationError)
        assert issubclass(TokenInvalidError, AuthenticationError)


class TestIdentity:
    """Test identity construction."""

    def test_from_claims_without_email(self):
        """Test email is optional."""
        identity = Identity.from_claims({"sub": "abc"})

        assert identity.id == "abc"
        assert identity.email is None

    def test_from_claims_without_subject(self):
        """Test a subject is required."""
        with pytest.raises(TokenInvalidError):
            Identity.from_claims({"email": "a@example.com"})


class TestIsListedAdmin:
    """Test the admin email list."""

    def test_listed(self):
        """Test listed emails match case-insensitively."""
        identity = Identity(id="1", email="Admin@Example.com")
        assert is_listed_admin(identity, ["admin@example.com"]) is True

    def test_not_listed(self):
        """Test other emails do not match."""
        identity = Identity(id="1", email="hr@example.com")
        assert is_listed_admin(identity, ["admin@example.com"]) is False

    def test_no_email(self):
        """Test identities without email are never listed."""
        assert is_listed_admin(Identity(id="1"), ["admin@example.com"]) is False
