"""
HTML response construction shared by the router and the error handlers.
"""

from fastapi import Request
from fastapi.responses import HTMLResponse

# The proxy replaces this with the real status.
PAGE_STATUS_CODE = 200


def page_response(request: Request, body: bytes) -> HTMLResponse:
    """Wrap a rendered page in a 200 text/html; charset=utf-8 response."""
    response = HTMLResponse(content=body, status_code=PAGE_STATUS_CODE)
    cache_control = request.app.state.settings.cache_control
    if cache_control:
        response.headers["Cache-Control"] = cache_control
    return response
