"""Compile API endpoints."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response
from starlette.concurrency import run_in_threadpool

from sliderepl.core import get_settings
from sliderepl.models import CompileOutcome, CompileResponse
from sliderepl.services import get_compiler_service
from sliderepl.web import render_output

logger = logging.getLogger(__name__)
router = APIRouter(tags=["compile"])

# The editor script treats this status as "build or program failed"
FAILURE_STATUS_CODE = 404


async def _execute(request: Request) -> CompileOutcome:
    """Read the raw snippet body and build/run it off the event loop."""
    source = await request.body()
    service = get_compiler_service()
    return await run_in_threadpool(service.execute, source)


@router.post("/compile", response_class=HTMLResponse)
async def compile_snippet(request: Request) -> Response:
    """
    Build and run the Go source in the request body.

    The body is raw source text, not JSON. Success returns the program
    output with status 200; build or run failures return the diagnostics
    with status 404.
    """
    outcome = await _execute(request)

    if outcome.failed:
        return HTMLResponse(render_output(outcome.text()), status_code=FAILURE_STATUS_CODE)

    if get_settings().html_output:
        return Response(content=outcome.output, media_type="text/html")
    return HTMLResponse(render_output(outcome.text()))


@router.post("/api/compile", response_model=CompileResponse)
async def compile_snippet_json(request: Request) -> CompileResponse:
    """
    Build and run the Go source in the request body.

    Always answers 200; the ``failed`` field tells whether the build or
    the program failed.
    """
    outcome = await _execute(request)
    return CompileResponse.from_outcome(outcome)
