"""
Public job listing endpoints.

Search over open jobs, job detail by slug, and the view counter.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.common import ListResponse, MessageResponse, list_response
from api.services import jobs as job_store
from api.services import listings
from core.jobs import Job, JobCriteria
from database.engine import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=ListResponse[Job],
    summary="Search Jobs",
    description="Search open jobs. Featured jobs are listed first.",
)
async def search_jobs(
    q: Optional[str] = Query(None, description="Matches title, company or any tag"),
    location: Optional[str] = Query(None, description="Location substring"),
    type: Optional[str] = Query(None, description="Job type, e.g. Full-time"),
    remote: bool = Query(False, description="Only remote jobs"),
    company_id: Optional[str] = Query(None, description="Employer id"),
    category: Optional[str] = Query(None, description="Category name"),
    db: AsyncSession = Depends(get_db),
):
    """Filter open listings by the given criteria, all optional and AND-combined."""
    criteria = JobCriteria(
        text=q,
        location=location,
        type=type,
        remote=remote,
        company_id=company_id,
        category=category,
    )
    jobs = await listings.search_public_jobs(db, criteria)
    return list_response(jobs)


@router.get(
    "/{slug}",
    response_model=Job,
    summary="Get Job",
    description="Resolve a job link. When titles collide the first match wins.",
)
async def get_job(
    slug: str = Path(..., description="Slug derived from the job title"),
    db: AsyncSession = Depends(get_db),
):
    """Return the first unfilled job whose title encodes to the slug."""
    job = await listings.find_job_by_slug(db, slug)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post(
    "/{job_id}/views",
    response_model=MessageResponse,
    summary="Record Job View",
    description="Increment the view counter shown as applications.",
)
async def record_view(
    job_id: str = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    """Count a detail view. Failures are logged and never reach the visitor."""
    try:
        counted = await job_store.increment_job_views(db, job_id)
    except Exception as e:
        logger.error(f"Failed to record view for job {job_id}: {e}")
        counted = False
    return MessageResponse(message="View recorded" if counted else "View not recorded")
