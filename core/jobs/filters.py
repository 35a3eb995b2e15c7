"""Client-side job search: filtering and featured-first ordering."""

from typing import Optional, Sequence

from core.jobs.models import DashboardStatus, Job, JobCriteria


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def matches_criteria(job: Job, criteria: JobCriteria) -> bool:
    """Check one job against every active criterion (logical AND)."""
    if criteria.text:
        term = criteria.text.lower()
        if not (
            _contains(job.title, term)
            or _contains(job.company, term)
            or any(_contains(tag, term) for tag in job.tags)
        ):
            return False

    if criteria.location and not _contains(job.location, criteria.location.lower()):
        return False

    if criteria.type and job.type.lower() != criteria.type.lower():
        return False

    if criteria.remote and not job.remote:
        return False

    if criteria.company_id and job.company_id != criteria.company_id:
        return False

    if criteria.category and criteria.category not in job.categories:
        return False

    return True


def filter_jobs(jobs: Sequence[Job], criteria: Optional[JobCriteria] = None) -> list[Job]:
    """
    Keep the jobs matching ``criteria``.

    No criteria, or criteria with nothing set, returns the input unchanged.
    """
    if criteria is None:
        return list(jobs)
    return [job for job in jobs if matches_criteria(job, criteria)]


def sort_featured_first(jobs: Sequence[Job]) -> list[Job]:
    """Featured jobs first; input order kept within each group."""
    return sorted(jobs, key=lambda job: not job.featured)


def search_jobs(jobs: Sequence[Job], criteria: Optional[JobCriteria] = None) -> list[Job]:
    """Filter then order, as every public listing does."""
    return sort_featured_first(filter_jobs(jobs, criteria))


def filter_dashboard_jobs(
    jobs: Sequence[Job],
    search: Optional[str] = None,
    status: DashboardStatus = "all",
) -> list[Job]:
    """Owner dashboard filter: title/company search plus fill status."""
    term = (search or "").lower()
    result = []
    for job in jobs:
        if term and not (_contains(job.title, term) or _contains(job.company, term)):
            continue
        if status == "active" and job.is_filled:
            continue
        if status == "filled" and not job.is_filled:
            continue
        result.append(job)
    return result
