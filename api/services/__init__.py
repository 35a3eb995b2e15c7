"""
API Services Layer.

Store queries and page loaders used by the route handlers.
"""

from api.services.jobs import (
    fetch_open_job_rows,
    fetch_unfilled_job_rows,
    fetch_employer_job_rows,
    fetch_all_job_rows,
    get_job_row,
    create_job,
    update_job,
    set_job_flag,
    delete_job,
    increment_job_views,
)

from api.services.employers import (
    ensure_employer,
    list_employers,
    is_super_admin,
)

from api.services.orders import (
    latest_order,
    has_completed_order,
)

from api.services.listings import (
    load_public_jobs,
    load_unfilled_jobs,
    search_public_jobs,
    find_job_by_slug,
    load_companies,
)

from api.services.preview import (
    PreviewDocument,
    build_preview,
)

__all__ = [
    # Jobs
    "fetch_open_job_rows",
    "fetch_unfilled_job_rows",
    "fetch_employer_job_rows",
    "fetch_all_job_rows",
    "get_job_row",
    "create_job",
    "update_job",
    "set_job_flag",
    "delete_job",
    "increment_job_views",
    # Employers
    "ensure_employer",
    "list_employers",
    "is_super_admin",
    # Orders
    "latest_order",
    "has_completed_order",
    # Listings
    "load_public_jobs",
    "load_unfilled_jobs",
    "search_public_jobs",
    "find_job_by_slug",
    "load_companies",
    # Preview
    "PreviewDocument",
    "build_preview",
]
