"""Slide editor page endpoints."""
import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from sliderepl.core import get_settings
from sliderepl.services import get_slide_deck_service
from sliderepl.web import get_templates

logger = logging.getLogger(__name__)
router = APIRouter(tags=["slides"])


def parse_slide_index(raw: Optional[str]) -> int:
    """Parse the ``s`` query value; anything unparsable means slide 0."""
    if raw is None:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0


def read_snippet(file_path: str) -> Optional[str]:
    """
    Read a source file from the configured snippet directory.

    Returns None when no snippet directory is configured or the file does
    not exist, in which case the slide is shown instead.
    """
    snippet_dir = get_settings().snippet_dir
    if snippet_dir is None or not file_path:
        return None

    # Prevent directory traversal
    root = os.path.realpath(snippet_dir)
    full_path = os.path.realpath(os.path.join(root, file_path))
    if not full_path.startswith(root + os.sep):
        raise HTTPException(status_code=403, detail="Access denied")
    if not os.path.isfile(full_path):
        return None
    return Path(full_path).read_text(encoding="utf-8", errors="replace")


def _render_page(request: Request, s: Optional[str], contents: Optional[str]) -> HTMLResponse:
    index = parse_slide_index(s)
    page = get_slide_deck_service().page_data(index, contents=contents)
    if page is None:
        raise HTTPException(status_code=404, detail="Slide not found")

    return get_templates().TemplateResponse(
        request,
        "front_page.html",
        {
            "page": page,
            "app_name": get_settings().app_name,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def front_page(
    request: Request,
    s: Optional[str] = Query(default=None, description="Slide index"),
) -> HTMLResponse:
    """Serve the editor with the requested slide loaded."""
    return _render_page(request, s, contents=None)


@router.get("/{file_path:path}", response_class=HTMLResponse)
async def file_page(
    request: Request,
    file_path: str,
    s: Optional[str] = Query(default=None, description="Slide index"),
) -> HTMLResponse:
    """
    Serve the editor with a file from the snippet directory loaded.

    Falls back to the requested slide when the file is unavailable.
    """
    return _render_page(request, s, contents=read_snippet(file_path))
