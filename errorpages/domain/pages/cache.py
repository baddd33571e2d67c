"""
Pre-rendered page cache.

Built once from the template before the server accepts connections and
never mutated afterwards, so concurrent readers need no locking.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from errorpages.domain.pages.template import PageTemplate, render_base

logger = logging.getLogger(__name__)

# Most of what Caddy produces, plus the Cloudflare-style 52x codes.
COMMON_STATUS_CODES: tuple[str, ...] = (
    "400", "401", "403", "404", "405", "408", "429",
    "500", "501", "502", "503", "504",
    "520", "521", "522", "523",
)


class PageCache:
    """Read-only mapping of status code strings to rendered pages.

    Holds only the fixed code list. Anything else is rendered from
    ``template`` by the caller.
    """

    def __init__(self, template: PageTemplate, pages: Mapping[str, bytes]) -> None:
        self._template = template
        self._pages = MappingProxyType(dict(pages))

    @property
    def template(self) -> PageTemplate:
        return self._template

    @property
    def pages(self) -> Mapping[str, bytes]:
        return self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def get(self, status_code: str) -> bytes | None:
        """Return the pre-rendered page, or None on a miss."""
        return self._pages.get(status_code)


def build_page_cache(
    template: PageTemplate, codes: Iterable[str] = COMMON_STATUS_CODES
) -> PageCache:
    """Pre-render the template for each status code.

    Args:
        template: The loaded page template.
        codes: Status code strings to render ahead of time.

    Returns:
        A PageCache holding one rendered page per code.
    """
    if not template.has_status_placeholder:
        logger.warning(
            "Template has no status code placeholder; every page will be identical"
        )

    base_text = template.without_request_id()
    pages = {code: render_base(base_text, code) for code in codes}

    cache = PageCache(template, pages)
    logger.info("Pre-rendered %d status pages into memory.", len(cache))
    return cache
