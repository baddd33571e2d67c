"""
Tests for the serve-page use case.

Path-to-key derivation and the fast/slow path split, without HTTP.
"""

from errorpages.application.pages.serve_error_page import (
    ServeErrorPageUseCase,
    status_key,
)
from errorpages.domain.pages.cache import build_page_cache
from errorpages.domain.pages.template import (
    REQUEST_ID_PLACEHOLDER,
    STATUS_PLACEHOLDER,
    PageTemplate,
)

TEMPLATE = PageTemplate(
    text=f"<h1>{STATUS_PLACEHOLDER}</h1><p>{REQUEST_ID_PLACEHOLDER}</p>"
)


class TestStatusKey:
    """Tests for deriving the cache key from a path."""

    def test_strips_leading_slash(self) -> None:
        assert status_key("/503") == "503"

    def test_strips_only_one_slash(self) -> None:
        assert status_key("//503") == "/503"

    def test_root_defaults_to_404(self) -> None:
        assert status_key("/") == "404"
        assert status_key("") == "404"

    def test_path_without_slash_is_kept(self) -> None:
        assert status_key("429") == "429"


class TestServeErrorPageUseCase:
    """Tests for ServeErrorPageUseCase."""

    def setup_method(self) -> None:
        self.use_case = ServeErrorPageUseCase(cache=build_page_cache(TEMPLATE))

    def test_cached_code(self) -> None:
        assert self.use_case.execute("/404") == b"<h1>404</h1><p></p>"

    def test_uncached_code(self) -> None:
        assert self.use_case.execute("/418") == b"<h1>418</h1><p></p>"

    def test_root_serves_404_page(self) -> None:
        assert self.use_case.execute("/") == self.use_case.execute("/404")

    def test_non_numeric_key_is_substituted_literally(self) -> None:
        assert self.use_case.execute("/teapot") == b"<h1>teapot</h1><p></p>"
