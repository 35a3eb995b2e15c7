"""
Public listing loaders.

Public pages must never fail because the store is down: read errors are
logged and the static sample listings are served instead.
"""

from typing import Awaitable, Callable, List, Mapping, Any, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from api.services import jobs as job_store
from api.services.sample_jobs import SAMPLE_JOB_ROWS
from core.jobs import (
    Company,
    Job,
    JobCriteria,
    aggregate_companies,
    decode_slug,
    normalize_jobs,
    search_jobs,
)

logger = logging.getLogger(__name__)

RowLoader = Callable[[AsyncSession], Awaitable[List[Mapping[str, Any]]]]


async def _load_or_sample(session: AsyncSession, loader: RowLoader, what: str) -> List[Job]:
    try:
        rows = await loader(session)
    except Exception as e:
        logger.error(f"Failed to load {what}, serving sample listings: {e}", exc_info=True)
        rows = SAMPLE_JOB_ROWS
    return normalize_jobs(rows)


async def load_public_jobs(session: AsyncSession) -> List[Job]:
    """Open jobs (not filled, not expired), newest first."""
    return await _load_or_sample(session, job_store.fetch_open_job_rows, "open jobs")


async def load_unfilled_jobs(session: AsyncSession) -> List[Job]:
    """Jobs a detail link may resolve to."""
    return await _load_or_sample(session, job_store.fetch_unfilled_job_rows, "unfilled jobs")


async def search_public_jobs(
    session: AsyncSession, criteria: Optional[JobCriteria] = None
) -> List[Job]:
    """Filtered public listing, featured jobs first."""
    return search_jobs(await load_public_jobs(session), criteria)


async def find_job_by_slug(session: AsyncSession, slug: str) -> Optional[Job]:
    """First unfilled job whose title encodes to ``slug``."""
    return decode_slug(slug, await load_unfilled_jobs(session))


async def load_companies(session: AsyncSession) -> List[Company]:
    """
    Companies projected from every job row, filled ones included, so an
    employer whose roles are all filled still appears with zero openings.
    """
    jobs = await _load_or_sample(session, job_store.fetch_all_job_rows, "company jobs")
    return aggregate_companies(jobs)
