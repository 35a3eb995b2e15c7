"""
Crawler-facing HTML for job links.

Link unfurlers (Slack, Facebook, X, LinkedIn) do not run the client bundle,
so job URLs are answered with a document carrying SEO, Open Graph, Twitter
Card and JobPosting JSON-LD metadata for that job. Anything that cannot be
resolved to a job gets the generic site document.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.config import Settings, settings
from core.jobs.models import Job
from core.utils.formatting import format_salary_range


TEMPLATE_DIR = Path(__file__).parent / "templates"

META_DESCRIPTION_CHARS = 150
PREVIEW_TEXT_CHARS = 200

EMPLOYMENT_TYPES = {
    "Full-time": "FULL_TIME",
    "Part-time": "PART_TIME",
    "Contract": "CONTRACTOR",
    "Internship": "INTERN",
}

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class PreviewCachePolicy:
    """Cache-Control values the caller attaches to rendered documents."""

    job: str
    fallback: str
    error: str

    @classmethod
    def from_settings(cls, config: Settings) -> "PreviewCachePolicy":
        return cls(
            job=config.preview_job_cache_control,
            fallback=config.preview_fallback_cache_control,
            error=config.preview_error_cache_control,
        )


def extract_slug(path: str) -> str:
    """Return the path text after the first ``/jobs/``, or an empty string."""
    if not path or "/jobs/" not in path:
        return ""
    return path.split("/jobs/", 1)[1]


def _job_posting_json_ld(
    job: Job, job_url: str, config: Settings, now: datetime
) -> dict[str, Any]:
    # datePosted is the render time, not the job's creation time.
    return {
        "@context": "https://schema.org",
        "@type": "JobPosting",
        "title": job.title,
        "description": job.description,
        "hiringOrganization": {
            "@type": "Organization",
            "name": job.company,
            "logo": job.company_logo or config.placeholder_logo_url,
        },
        "jobLocation": {
            "@type": "Place",
            "address": {
                "@type": "PostalAddress",
                "addressLocality": job.location,
                "addressRegion": "NSW",
                "addressCountry": "AU",
            },
        },
        "datePosted": now.isoformat(),
        "employmentType": EMPLOYMENT_TYPES.get(job.type, "FULL_TIME"),
        "workHours": job.type,
        "url": job_url,
        "jobBenefits": ", ".join(job.categories),
    }


def render_job_preview(
    job: Job,
    request_host: str,
    *,
    config: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Render the preview document for one job.

    Args:
        job: Normalized job
        request_host: Host header of the inbound request
        config: Settings to read site name and placeholder URLs from
        now: Render time, used for the JSON-LD ``datePosted``

    Returns:
        Complete HTML document
    """
    config = config or settings
    now = now or datetime.now(timezone.utc)

    job_url = f"https://{request_host}/jobs/{job.slug}"
    page_title = f"{job.title} at {job.company} - {config.site_name}"
    meta_description = (
        f"{job.title} position at {job.company} in {job.location}. "
        f"{job.description[:META_DESCRIPTION_CHARS]}..."
    )
    keywords = ", ".join(
        [job.title, job.company, job.location, "jobs", "western sydney", *job.categories]
    )

    template = _environment.get_template("job_preview.html")
    return template.render(
        job=job,
        site_name=config.site_name,
        page_title=page_title,
        meta_description=meta_description,
        job_url=job_url,
        image_url=job.company_logo or config.placeholder_image_url,
        keywords=keywords,
        json_ld=_job_posting_json_ld(job, job_url, config, now),
        preview_text=f"{job.description[:PREVIEW_TEXT_CHARS]}...",
        salary_text=(
            format_salary_range(job.salary.min, job.salary.max, job.salary.currency)
            if job.salary
            else None
        ),
        bundle_path=config.app_bundle_path,
    )


def render_fallback(*, config: Optional[Settings] = None) -> str:
    """Render the generic site document (no redirect)."""
    config = config or settings
    template = _environment.get_template("fallback.html")
    return template.render(
        site_name=config.site_name,
        site_title=config.site_title,
        site_description=config.site_description,
        image_url=config.placeholder_image_url,
        bundle_path=config.app_bundle_path,
    )


def render_preview(
    job: Optional[Job],
    request_host: str,
    *,
    config: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> str:
    """Render the job document, or the generic one when there is no job."""
    if job is None:
        return render_fallback(config=config)
    return render_job_preview(job, request_host, config=config, now=now)
