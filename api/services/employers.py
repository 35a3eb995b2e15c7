"""Employer profile and admin lookups."""

from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.employers import AdminUser, Employer

logger = logging.getLogger(__name__)


def _employer_to_dict(employer: Employer) -> Dict[str, Any]:
    return {
        "id": employer.id,
        "email": employer.email,
        "company_name": employer.company_name,
        "company_logo": employer.company_logo,
        "contact_person": employer.contact_person,
        "phone": employer.phone,
        "created_at": employer.created_at.isoformat() if employer.created_at else None,
    }


async def ensure_employer(
    session: AsyncSession,
    user_id: str,
    email: Optional[str],
    company_name: str,
    company_logo: Optional[str] = None,
    phone: Optional[str] = None,
    contact_person: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Return the employer profile for an account, creating it on first post.

    An existing profile only has its logo refreshed when a new one is given.
    """
    employer = await session.get(Employer, user_id)

    if employer is None:
        employer = Employer(
            id=user_id,
            email=email,
            company_name=company_name,
            company_logo=company_logo,
            contact_person=contact_person or "Unknown",
            phone=phone,
        )
        session.add(employer)
        await session.commit()
        await session.refresh(employer)
        logger.info(f"Created employer profile for {user_id}")
    elif company_logo and company_logo != employer.company_logo:
        employer.company_logo = company_logo
        await session.commit()
        await session.refresh(employer)

    return _employer_to_dict(employer)


async def list_employers(session: AsyncSession) -> List[Dict[str, Any]]:
    """All employer profiles, newest first."""
    result = await session.execute(
        select(Employer).order_by(Employer.created_at.desc())
    )
    return [_employer_to_dict(e) for e in result.scalars().all()]


async def is_super_admin(session: AsyncSession, user_id: str) -> bool:
    """Check the ``admin_users`` table for the account."""
    admin = await session.get(AdminUser, user_id)
    return bool(admin and admin.is_super_admin)
