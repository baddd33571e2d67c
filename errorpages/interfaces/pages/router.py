"""
Error page router.

A single catch-all route. The path after the leading slash is the
status code to render; the method is never checked.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from errorpages.application.pages.serve_error_page import ServeErrorPageUseCase
from errorpages.interfaces.pages.dependencies import (
    get_request_path,
    get_serve_error_page_use_case,
)
from errorpages.interfaces.pages.responses import page_response

# Anything else is answered by the HTTPException handler with the same page.
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=["pages"])


@router.api_route(
    "/{path:path}",
    methods=PAGE_METHODS,
    response_class=HTMLResponse,
    summary="Render error page",
    description="Renders the error page for the status code in the path.",
)
async def serve_error_page(
    request: Request,
    use_case: ServeErrorPageUseCase = Depends(get_serve_error_page_use_case),
) -> HTMLResponse:
    """Return the rendered page for ``/<code>``; ``/`` renders 404."""
    return page_response(request, use_case.execute(get_request_path(request)))
