"""Read-time company projection over job postings."""

from typing import Optional, Sequence

from core.jobs.models import Company, Job


def aggregate_companies(jobs: Sequence[Job]) -> list[Company]:
    """
    Group jobs into companies keyed by the owning employer.

    Name, logo and website come from the last job seen for an employer.
    ``open_positions`` counts that employer's jobs that are not filled.
    Companies keep the order in which their employer first appears.
    """
    companies: dict[str, Company] = {}
    open_counts: dict[str, int] = {}

    for job in jobs:
        if not job.employer_id:
            continue
        companies[job.employer_id] = Company(
            id=job.employer_id,
            name=job.company,
            logo=job.company_logo,
            website=job.company_website,
        )
        if not job.is_filled:
            open_counts[job.employer_id] = open_counts.get(job.employer_id, 0) + 1

    for employer_id, company in companies.items():
        company.open_positions = open_counts.get(employer_id, 0)

    return list(companies.values())


def filter_companies(companies: Sequence[Company], search: Optional[str] = None) -> list[Company]:
    """Companies whose name contains ``search``, case-insensitively."""
    term = (search or "").strip().lower()
    if not term:
        return list(companies)
    return [company for company in companies if term in company.name.lower()]
