"""URL slugs derived from job titles."""

import re
from typing import Iterable, Optional

from core.jobs.models import Job


_WHITESPACE = re.compile(r"\s+")
_NOT_SLUG_CHAR = re.compile(r"[^a-z0-9-]")


def encode_slug(title: str) -> str:
    """
    Build the link slug for a title.

    Lowercases, turns every whitespace run into a single ``-`` and drops
    anything outside ``[a-z0-9-]``. Leading and trailing whitespace is not
    trimmed, so ``"  multi   space "`` becomes ``"-multi-space-"``. Two
    titles can share a slug.
    """
    slug = _WHITESPACE.sub("-", (title or "").lower())
    return _NOT_SLUG_CHAR.sub("", slug)


def decode_slug(slug: str, candidates: Iterable[Job]) -> Optional[Job]:
    """Return the first candidate whose title encodes to ``slug``."""
    for job in candidates:
        if encode_slug(job.title) == slug:
            return job
    return None
