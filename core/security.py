"""
Access token verification.

Employers sign in with the hosted auth provider, which issues HS256 access
tokens. The API only verifies them; it never issues tokens of its own.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import jwt

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Base exception for authentication errors."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when the access token has expired."""
    pass


class TokenInvalidError(AuthenticationError):
    """Raised when the access token is malformed, badly signed or missing claims."""
    pass


@dataclass(frozen=True)
class Identity:
    """Signed-in account as read from the access token."""

    id: str
    email: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "Identity":
        subject = claims.get("sub")
        if not subject:
            raise TokenInvalidError("Token has no subject")
        return cls(id=str(subject), email=claims.get("email"), role=claims.get("role"))


def verify_jwt_token(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    audience: Optional[str] = "authenticated",
) -> Identity:
    """
    Verify an access token and return the identity it carries.

    Args:
        token: Encoded JWT, without the ``Bearer`` prefix
        secret: Shared signing secret
        algorithm: Signing algorithm
        audience: Expected ``aud`` claim, or None to skip the check

    Returns:
        Identity for the token subject

    Raises:
        TokenExpiredError: If the token has expired
        TokenInvalidError: For any other verification failure
    """
    options = {"require": ["sub", "exp"]}
    if audience is None:
        options["verify_aud"] = False

    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            audience=audience,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {str(e)}")

    return Identity.from_claims(claims)


def is_listed_admin(identity: Identity, admin_emails: Iterable[str]) -> bool:
    """True when the identity's email is in the configured admin list."""
    if not identity.email:
        return False
    email = identity.email.lower()
    return any(email == listed.lower() for listed in admin_emails)
