"""
Job board domain logic.

- Slug codec for job links
- Normalizer from store rows to the canonical Job
- Search filters with featured-first ordering
- Company projection and the posting wizard
"""

from core.jobs.models import (
    Company,
    Job,
    JobCriteria,
    Salary,
)

from core.jobs.slugs import (
    encode_slug,
    decode_slug,
)

from core.jobs.normalizer import (
    MalformedJobRow,
    format_job_type,
    normalize_job,
    normalize_jobs,
)

from core.jobs.filters import (
    filter_dashboard_jobs,
    filter_jobs,
    search_jobs,
    sort_featured_first,
)

from core.jobs.companies import aggregate_companies, filter_companies

__all__ = [
    # Models
    "Company",
    "Job",
    "JobCriteria",
    "Salary",
    # Slugs
    "encode_slug",
    "decode_slug",
    # Normalizer
    "MalformedJobRow",
    "format_job_type",
    "normalize_job",
    "normalize_jobs",
    # Filters
    "filter_dashboard_jobs",
    "filter_jobs",
    "search_jobs",
    "sort_featured_first",
    # Companies
    "aggregate_companies",
    "filter_companies",
]
