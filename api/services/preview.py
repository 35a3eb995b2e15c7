"""Resolve an inbound path to the preview document and its cache header."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from api.services import jobs as job_store
from core.config import Settings, settings
from core.jobs import decode_slug, normalize_jobs
from core.preview.renderer import (
    PreviewCachePolicy,
    extract_slug,
    render_fallback,
    render_job_preview,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewDocument:
    html: str
    cache_control: str
    slug: str = ""
    job_id: Optional[str] = None


async def build_preview(
    path: str,
    request_host: str,
    session: AsyncSession,
    *,
    config: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> PreviewDocument:
    """
    Build the crawler document for a request path. Never raises.

    - no ``/jobs/<slug>`` in the path: generic document, long cache
    - slug that matches no unfilled job: generic document, long cache
    - store or rendering failure: generic document, ``max-age=0``
    """
    config = config or settings
    cache = PreviewCachePolicy.from_settings(config)
    slug = extract_slug(path)

    if not slug:
        return PreviewDocument(html=render_fallback(config=config), cache_control=cache.fallback)

    try:
        rows = await job_store.fetch_unfilled_job_rows(session)
        job = decode_slug(slug, normalize_jobs(rows))
        if job is not None:
            html = render_job_preview(job, request_host, config=config, now=now)
            return PreviewDocument(
                html=html, cache_control=cache.job, slug=slug, job_id=job.id
            )
    except Exception as e:
        logger.error(f"Preview lookup failed for slug {slug!r}: {e}", exc_info=True)
        return PreviewDocument(
            html=render_fallback(config=config), cache_control=cache.error, slug=slug
        )

    logger.info(f"No unfilled job for slug {slug!r}, serving generic preview")
    return PreviewDocument(
        html=render_fallback(config=config), cache_control=cache.fallback, slug=slug
    )
