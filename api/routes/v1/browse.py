"""Category and suburb browse pages."""

from fastapi import APIRouter, Depends, HTTPException, Path
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.common import ListResponse, list_response
from api.services import listings
from core.jobs import Job, JobCriteria
from core.jobs.catalog import (
    JOB_CATEGORIES,
    WESTERN_SYDNEY_LOCATIONS,
    browse_slug,
    find_category,
    find_location,
)
from database.engine import get_db

router = APIRouter(tags=["browse"])


class BrowseEntry(BaseModel):
    """A category or suburb with its page slug and open job count."""

    name: str
    slug: str
    job_count: int


async def _entries(db: AsyncSession, names, field: str) -> list[BrowseEntry]:
    jobs = await listings.load_public_jobs(db)
    entries = []
    for name in names:
        if field == "category":
            count = sum(1 for job in jobs if name in job.categories)
        else:
            count = sum(1 for job in jobs if name.lower() in job.location.lower())
        entries.append(BrowseEntry(name=name, slug=browse_slug(name), job_count=count))
    return entries


@router.get(
    "/categories",
    response_model=ListResponse[BrowseEntry],
    summary="List Categories",
)
async def list_categories(db: AsyncSession = Depends(get_db)):
    return list_response(await _entries(db, JOB_CATEGORIES, "category"))


@router.get(
    "/categories/{slug}/jobs",
    response_model=ListResponse[Job],
    summary="List Category Jobs",
    description="Open jobs tagged with one category, featured first.",
)
async def list_category_jobs(
    slug: str = Path(..., description="Category page slug, e.g. healthcare-medical"),
    db: AsyncSession = Depends(get_db),
):
    category = find_category(slug)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    jobs = await listings.search_public_jobs(db, JobCriteria(category=category))
    return list_response(jobs)


@router.get(
    "/locations",
    response_model=ListResponse[BrowseEntry],
    summary="List Locations",
)
async def list_locations(db: AsyncSession = Depends(get_db)):
    return list_response(await _entries(db, WESTERN_SYDNEY_LOCATIONS, "location"))


@router.get(
    "/locations/{slug}/jobs",
    response_model=ListResponse[Job],
    summary="List Location Jobs",
    description="Open jobs whose location mentions the suburb, featured first.",
)
async def list_location_jobs(
    slug: str = Path(..., description="Suburb page slug, e.g. mount-druitt"),
    db: AsyncSession = Depends(get_db),
):
    location = find_location(slug)
    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")
    jobs = await listings.search_public_jobs(db, JobCriteria(location=location))
    return list_response(jobs)
