"""
Crawler-facing pages.

Every GET outside the API answers with HTML: job links get a document with
that job's social metadata, everything else the generic site document.
Registered last so it never shadows API routes.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_settings
from api.services.preview import build_preview
from core.config import Settings
from database.engine import get_db

router = APIRouter(tags=["preview"])


@router.get(
    "/{path:path}",
    response_class=HTMLResponse,
    include_in_schema=False,
)
async def preview_page(
    path: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """Always 200 with HTML and a Cache-Control header."""
    if request.url.path.startswith("/api/"):
        raise HTTPException(status_code=404, detail="Not found")

    host = request.headers.get("host") or request.url.netloc
    document = await build_preview(request.url.path, host, db, config=config)
    return HTMLResponse(
        content=document.html,
        status_code=200,
        headers={"Cache-Control": document.cache_control},
    )
