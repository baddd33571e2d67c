"""
Centralized error handlers for FastAPI.

The service never answers with its own 4xx/5xx: the proxy in front of it
owns the outward status. Framework errors (e.g. a method the route table
does not list) get the page for the requested path, and unexpected
errors get the 500 page. No stack traces reach clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from errorpages.application.pages.serve_error_page import ServeErrorPageUseCase
from errorpages.interfaces.pages.dependencies import get_page_cache, get_request_path
from errorpages.interfaces.pages.responses import page_response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "500"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance. Its state must carry the
            page cache and settings.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse:
        """Serve the requested page regardless of the framework's objection."""
        path = get_request_path(request)
        logger.debug("Framework error %d on %s", exc.status_code, path)
        use_case = ServeErrorPageUseCase(cache=get_page_cache(request))
        return page_response(request, use_case.execute(path))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> HTMLResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        use_case = ServeErrorPageUseCase(cache=get_page_cache(request))
        return page_response(request, use_case.execute(INTERNAL_ERROR_CODE))
