"""
Mapping from raw store rows to the canonical Job shape.

Rows come from the ``jobs`` table (snake_case keys, nullable columns).
Malformed rows are dropped with a warning instead of failing the whole list.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from core.config import settings
from core.jobs.models import Job, Salary
from core.jobs.slugs import encode_slug

logger = logging.getLogger(__name__)

DEFAULT_JOB_TYPE = "Full-time"
REQUIRED_FIELDS = ("id", "title", "company_name")


class MalformedJobRow(ValueError):
    """Raised when a row lacks the fields needed to identify a job."""


def format_job_type(raw_type: Optional[str]) -> str:
    """
    Convert a stored job type to its display form.

    ``full_time`` -> ``Full-time``, ``contract`` -> ``Contract``.
    """
    if not raw_type:
        return DEFAULT_JOB_TYPE
    words = raw_type.replace("_", "-").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def to_store_job_type(display_type: str) -> str:
    """Inverse of :func:`format_job_type` for the four known types."""
    return display_type.lower().replace("-", "_")


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _row_id(row: Any) -> Any:
    return row.get("id") if isinstance(row, Mapping) else None


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def normalize_job(
    row: Mapping[str, Any],
    *,
    placeholder_logo: Optional[str] = None,
    default_currency: Optional[str] = None,
) -> Job:
    """
    Normalize one raw job row.

    Args:
        row: Raw row from the record store
        placeholder_logo: Logo used when the row has none
        default_currency: Currency used when the salary has none

    Returns:
        Canonical Job

    Raises:
        MalformedJobRow: If the row is not a mapping or ``id``, ``title`` or
            ``company_name`` is missing
    """
    if not isinstance(row, Mapping):
        raise MalformedJobRow(f"Job row is not a mapping: {type(row).__name__}")

    missing = [field for field in REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise MalformedJobRow(f"Job row missing {', '.join(missing)}")

    placeholder_logo = placeholder_logo or settings.placeholder_logo_url
    default_currency = default_currency or settings.default_currency

    salary = None
    salary_min = row.get("salary_min")
    salary_max = row.get("salary_max")
    if salary_min is not None and salary_max is not None:
        salary = Salary(
            min=salary_min,
            max=salary_max,
            currency=row.get("salary_currency") or default_currency,
        )

    title = str(row["title"])
    employer_id = str(row.get("employer_id") or "")

    return Job(
        id=str(row["id"]),
        slug=encode_slug(title),
        title=title,
        company=str(row["company_name"]),
        company_logo=row.get("company_logo") or placeholder_logo,
        company_website=_optional_text(row.get("company_website")),
        location=row.get("location") or "",
        type=format_job_type(row.get("job_type")),
        remote=bool(row.get("is_remote")),
        salary=salary,
        description=row.get("description") or "",
        requirements=_as_list(row.get("requirements")),
        benefits=_as_list(row.get("benefits")),
        tags=_as_list(row.get("tags")),
        categories=_as_list(row.get("categories")),
        posted_date=row.get("created_at"),
        featured=bool(row.get("is_featured")),
        urgent=False,
        applications=row.get("applications_count") or 0,
        is_filled=bool(row.get("is_filled")),
        employer_id=employer_id,
        company_id=employer_id,
        contact_email=_optional_text(row.get("contact_email")),
        contact_phone=_optional_text(row.get("contact_phone")),
        contact_apply_url=_optional_text(row.get("apply_url")),
    )


def normalize_jobs(
    rows: Iterable[Mapping[str, Any]],
    *,
    placeholder_logo: Optional[str] = None,
    default_currency: Optional[str] = None,
) -> list[Job]:
    """Normalize rows in order, skipping the ones that cannot be mapped."""
    jobs = []
    for row in rows:
        try:
            jobs.append(
                normalize_job(
                    row,
                    placeholder_logo=placeholder_logo,
                    default_currency=default_currency,
                )
            )
        except MalformedJobRow as e:
            logger.warning(f"Skipping job row {_row_id(row)!r}: {e}")
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping unreadable job row {_row_id(row)!r}: {e}")
    return jobs
