"""Admin panel endpoints. Every route requires an admin account."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_admin
from api.schemas.common import ListResponse, list_response
from api.schemas.jobs import AdminJobUpdate, EmployerResponse, FlagUpdate
from api.services import employers as employer_service
from api.services import jobs as job_store
from core.jobs import Job, normalize_job, normalize_jobs
from database.engine import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get(
    "/jobs",
    response_model=ListResponse[Job],
    summary="List All Jobs",
    description="Every job including filled and expired ones.",
)
async def list_all_jobs(db: AsyncSession = Depends(get_db)):
    try:
        rows = await job_store.fetch_all_job_rows(db)
    except Exception as e:
        logger.error(f"Failed to load admin job list: {e}", exc_info=True)
        rows = []
    return list_response(normalize_jobs(rows))


@router.get(
    "/employers",
    response_model=ListResponse[EmployerResponse],
    summary="List Employers",
)
async def list_all_employers(db: AsyncSession = Depends(get_db)):
    try:
        employers = await employer_service.list_employers(db)
    except Exception as e:
        logger.error(f"Failed to load employers: {e}", exc_info=True)
        employers = []
    return list_response(employers)


@router.patch(
    "/jobs/{job_id}",
    response_model=Job,
    summary="Edit Job",
)
async def edit_job(
    body: AdminJobUpdate,
    job_id: str = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    row = await job_store.update_job(db, job_id, body.to_row())
    if row is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return normalize_job(row)


@router.patch(
    "/jobs/{job_id}/featured",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Set Job Featured",
)
async def set_featured(
    body: FlagUpdate,
    job_id: str = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    if not await job_store.set_job_flag(db, job_id, "is_featured", body.value):
        raise HTTPException(status_code=404, detail="Job not found")


@router.patch(
    "/jobs/{job_id}/filled",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Set Job Filled",
)
async def set_filled(
    body: FlagUpdate,
    job_id: str = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    if not await job_store.set_job_flag(db, job_id, "is_filled", body.value):
        raise HTTPException(status_code=404, detail="Job not found")


@router.delete(
    "/jobs/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Job",
)
async def delete_job(
    job_id: str = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    if not await job_store.delete_job(db, job_id):
        raise HTTPException(status_code=404, detail="Job not found")
