"""
Dependency injection for the page router.

The page cache is built by the app factory and kept on ``app.state``;
these functions hand it to routes and error handlers.
"""

from fastapi import Depends, Request

from errorpages.application.pages.serve_error_page import ServeErrorPageUseCase
from errorpages.domain.pages.cache import PageCache


def get_page_cache(request: Request) -> PageCache:
    """Return the application's pre-rendered page cache."""
    return request.app.state.page_cache


def get_serve_error_page_use_case(
    cache: PageCache = Depends(get_page_cache),
) -> ServeErrorPageUseCase:
    """Build ServeErrorPageUseCase over the application's cache."""
    return ServeErrorPageUseCase(cache=cache)


def get_request_path(request: Request) -> str:
    """Return the decoded request path below the app's mount point.

    Read from the catch-all path parameter rather than ``request.url``,
    which is rebuilt from the decoded path and truncates at ``?`` or ``#``.
    """
    if "path" in request.path_params:
        return "/" + request.path_params["path"]
    return request.scope["path"]
