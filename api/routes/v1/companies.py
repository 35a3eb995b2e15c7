"""Company directory endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.common import ListResponse, list_response
from api.services import listings
from core.jobs import Company, Job, JobCriteria, filter_companies
from database.engine import get_db

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get(
    "",
    response_model=ListResponse[Company],
    summary="List Companies",
    description=(
        "Employers that have posted jobs, with their open position counts. "
        "Optionally narrowed by a company name search."
    ),
)
async def list_companies(
    q: Optional[str] = Query(None, description="Company name contains"),
    db: AsyncSession = Depends(get_db),
):
    companies = await listings.load_companies(db)
    return list_response(filter_companies(companies, q))


@router.get(
    "/{company_id}/jobs",
    response_model=ListResponse[Job],
    summary="List Company Jobs",
    description="Open jobs posted by one employer, featured first.",
)
async def list_company_jobs(
    company_id: str = Path(..., description="Employer id"),
    db: AsyncSession = Depends(get_db),
):
    jobs = await listings.search_public_jobs(db, JobCriteria(company_id=company_id))
    return list_response(jobs)
