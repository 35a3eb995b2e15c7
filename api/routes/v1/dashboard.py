"""
Employer dashboard endpoints.

Owners see every job they posted, filled or not, and can fill, reopen or
delete them. All queries are scoped to the signed-in account.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_identity
from api.schemas.common import ListResponse, list_response
from api.schemas.jobs import FlagUpdate
from api.services import jobs as job_store
from core.jobs import Job, filter_dashboard_jobs, normalize_jobs
from core.jobs.models import DashboardStatus
from core.security import Identity
from database.engine import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/jobs",
    response_model=ListResponse[Job],
    summary="List My Jobs",
    description="Jobs owned by the signed-in employer, newest first.",
)
async def list_my_jobs(
    search: Optional[str] = Query(None, description="Matches title or company"),
    status_filter: DashboardStatus = Query("all", alias="status"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    """A failed read shows an empty dashboard instead of an error."""
    try:
        rows = await job_store.fetch_employer_job_rows(db, identity.id)
    except Exception as e:
        logger.error(f"Failed to load dashboard jobs for {identity.id}: {e}", exc_info=True)
        rows = []
    jobs = filter_dashboard_jobs(normalize_jobs(rows), search=search, status=status_filter)
    return list_response(jobs)


@router.patch(
    "/jobs/{job_id}/filled",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Set Job Filled",
)
async def set_filled(
    body: FlagUpdate,
    job_id: str = Path(..., description="Job ID"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    if not await job_store.set_job_flag(db, job_id, "is_filled", body.value, employer_id=identity.id):
        raise HTTPException(status_code=404, detail="Job not found")


@router.delete(
    "/jobs/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Job",
    description="Permanently delete an owned job.",
)
async def delete_my_job(
    job_id: str = Path(..., description="Job ID"),
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    if not await job_store.delete_job(db, job_id, employer_id=identity.id):
        raise HTTPException(status_code=404, detail="Job not found")
