"""FastAPI dependencies for dependency injection."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from api.services import employers as employer_service
from core.config import Settings, settings
from core.integrations.stripe import StripeClient
from core.security import (
    AuthenticationError,
    Identity,
    is_listed_admin,
    verify_jwt_token,
)
from database.engine import get_db

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def get_stripe_client(request: Request) -> StripeClient:
    """Payment client created in the application lifespan."""
    return request.app.state.stripe_client


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_settings),
) -> Optional[Identity]:
    """
    Identity from the bearer token, or None for anonymous requests.
    An invalid or expired token is treated as anonymous.
    """
    if credentials is None:
        return None

    try:
        return verify_jwt_token(
            credentials.credentials,
            config.supabase_jwt_secret,
            config.supabase_jwt_algorithm,
            config.supabase_jwt_audience,
        )
    except AuthenticationError as e:
        logger.info(f"Ignoring bearer token: {e}")
        return None


async def require_identity(
    identity: Optional[Identity] = Depends(get_current_identity),
) -> Identity:
    """Require a signed-in account."""
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


async def require_admin(
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings),
) -> Identity:
    """
    Require an admin account: listed in ``ADMIN_EMAILS`` or flagged
    ``is_super_admin``. A failed lookup counts as not admin.
    """
    if is_listed_admin(identity, config.admin_emails):
        return identity

    try:
        allowed = await employer_service.is_super_admin(db, identity.id)
    except Exception as e:
        logger.error(f"Admin lookup failed for {identity.id}: {e}")
        allowed = False

    if not allowed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return identity
