"""Job store queries. Every function takes the request's AsyncSession."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.jobs import JobPosting

logger = logging.getLogger(__name__)

JOB_FLAGS = ("is_featured", "is_filled")

# Columns an update may touch; ownership and counters are excluded.
EDITABLE_COLUMNS = frozenset(
    {
        "title",
        "description",
        "company_name",
        "company_logo",
        "company_website",
        "location",
        "salary_min",
        "salary_max",
        "salary_currency",
        "job_type",
        "is_remote",
        "contact_email",
        "contact_phone",
        "apply_url",
        "requirements",
        "benefits",
        "tags",
        "categories",
    }
)


async def _fetch_rows(session: AsyncSession, query) -> List[Dict[str, Any]]:
    result = await session.execute(query)
    return [job.to_row() for job in result.scalars().all()]


async def fetch_open_job_rows(
    session: AsyncSession,
    now: Optional[datetime] = None,
) -> List[Dict[str, Any]]:
    """Jobs shown publicly: not filled and not expired, newest first."""
    now = now or datetime.now(timezone.utc)
    query = (
        select(JobPosting)
        .where(JobPosting.is_filled.is_(False))
        .where(JobPosting.expires_at >= now)
        .order_by(JobPosting.created_at.desc())
    )
    return await _fetch_rows(session, query)


async def fetch_unfilled_job_rows(session: AsyncSession) -> List[Dict[str, Any]]:
    """Jobs a link may still resolve to (detail page and link previews)."""
    query = (
        select(JobPosting)
        .where(JobPosting.is_filled.is_(False))
        .order_by(JobPosting.created_at.desc())
    )
    return await _fetch_rows(session, query)


async def fetch_employer_job_rows(
    session: AsyncSession, employer_id: str
) -> List[Dict[str, Any]]:
    """Every job owned by one account, filled or not."""
    query = (
        select(JobPosting)
        .where(JobPosting.employer_id == employer_id)
        .order_by(JobPosting.created_at.desc())
    )
    return await _fetch_rows(session, query)


async def fetch_all_job_rows(session: AsyncSession) -> List[Dict[str, Any]]:
    """Every job in the store (admin panel)."""
    query = select(JobPosting).order_by(JobPosting.created_at.desc())
    return await _fetch_rows(session, query)


async def get_job_row(
    session: AsyncSession,
    job_id: str,
    employer_id: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Fetch one job, optionally scoped to its owner."""
    query = select(JobPosting).where(JobPosting.id == job_id)
    if employer_id is not None:
        query = query.where(JobPosting.employer_id == employer_id)
    result = await session.execute(query)
    job = result.scalar_one_or_none()
    return job.to_row() if job else None


async def create_job(session: AsyncSession, row: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a job row and return it as stored."""
    job = JobPosting(**row)
    session.add(job)
    await session.commit()
    await session.refresh(job)
    logger.info(f"Created job {job.id} for employer {job.employer_id}")
    return job.to_row()


async def update_job(
    session: AsyncSession,
    job_id: str,
    values: Dict[str, Any],
    employer_id: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    Update editable columns of a job.

    Args:
        session: Database session
        job_id: Job to update
        values: Column values; anything not editable is ignored
        employer_id: When given, only the owner's job is updated

    Returns:
        Updated row, or None if no matching job exists
    """
    changes = {k: v for k, v in values.items() if k in EDITABLE_COLUMNS}
    query = update(JobPosting).where(JobPosting.id == job_id)
    if employer_id is not None:
        query = query.where(JobPosting.employer_id == employer_id)

    if changes:
        result = await session.execute(query.values(**changes))
        await session.commit()
        if result.rowcount == 0:
            return None
        logger.info(f"Updated job {job_id}: {sorted(changes)}")

    return await get_job_row(session, job_id, employer_id)


async def set_job_flag(
    session: AsyncSession,
    job_id: str,
    flag: str,
    value: bool,
    employer_id: Optional[str] = None,
) -> bool:
    """Set ``is_featured`` or ``is_filled``. Returns False if no job matched."""
    if flag not in JOB_FLAGS:
        raise ValueError(f"Unknown job flag: {flag}")

    query = update(JobPosting).where(JobPosting.id == job_id)
    if employer_id is not None:
        query = query.where(JobPosting.employer_id == employer_id)

    result = await session.execute(query.values({flag: value}))
    await session.commit()
    if result.rowcount == 0:
        return False
    logger.info(f"Set {flag}={value} on job {job_id}")
    return True


async def delete_job(
    session: AsyncSession,
    job_id: str,
    employer_id: Optional[str] = None,
) -> bool:
    """Permanently delete a job. Returns False if no job matched."""
    query = delete(JobPosting).where(JobPosting.id == job_id)
    if employer_id is not None:
        query = query.where(JobPosting.employer_id == employer_id)

    result = await session.execute(query)
    await session.commit()
    if result.rowcount == 0:
        return False
    logger.info(f"Deleted job {job_id}")
    return True


async def increment_job_views(session: AsyncSession, job_id: str) -> bool:
    """Add one to the view counter shown as ``applications``."""
    result = await session.execute(
        update(JobPosting)
        .where(JobPosting.id == job_id)
        .values(applications_count=JobPosting.applications_count + 1)
    )
    await session.commit()
    return result.rowcount > 0
