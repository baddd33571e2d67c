"""
Use case: turn a request path into a rendered error page.
"""

from errorpages.domain.pages.cache import PageCache

DEFAULT_STATUS_CODE = "404"


def status_key(path: str) -> str:
    """Derive the status code key from a URL path.

    One leading slash is dropped; an empty remainder means the root was
    requested and maps to the 404 page.
    """
    key = path[1:] if path.startswith("/") else path
    return key or DEFAULT_STATUS_CODE


class ServeErrorPageUseCase:
    """Serve a pre-rendered page, rendering from the template on a miss."""

    def __init__(self, cache: PageCache) -> None:
        self._cache = cache

    def execute(self, path: str) -> bytes:
        """Return the page body for a request path.

        Args:
            path: The URL path, with or without its leading slash.

        Returns:
            UTF-8 encoded HTML with no placeholder tokens left.
        """
        key = status_key(path)
        page = self._cache.get(key)
        if page is None:
            page = self._cache.template.render(key)
        return page
