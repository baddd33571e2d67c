"""
Page template entity.

The template is plain HTML carrying two literal placeholder tokens,
in the syntax Caddy uses for its own placeholders. Rendering is
mechanical string replacement.
"""

import html
from dataclasses import dataclass

STATUS_PLACEHOLDER = '{{placeholder "http.error.status_code"}}'
REQUEST_ID_PLACEHOLDER = '{{placeholder "http.request.header.X-Request-ID"}}'


@dataclass(frozen=True)
class PageTemplate:
    """Immutable HTML template loaded once at startup.

    Attributes:
        text: Raw template text, placeholders intact.
    """

    text: str

    @property
    def has_status_placeholder(self) -> bool:
        return STATUS_PLACEHOLDER in self.text

    def without_request_id(self) -> str:
        """Return the template text with every request-id placeholder blanked.

        The request identifier is never available to this process, so the
        placeholder is always replaced by the empty string.
        """
        return self.text.replace(REQUEST_ID_PLACEHOLDER, "")

    def render(self, status_code: str) -> bytes:
        """Render the page for an arbitrary status code as UTF-8 bytes.

        The status code goes in first and the request-id placeholder is
        blanked afterwards, so a code taken from a request path cannot
        carry a placeholder into the page. The code is HTML-escaped; both
        tokens contain double quotes and cannot survive escaping.
        """
        text = self.text.replace(STATUS_PLACEHOLDER, html.escape(status_code))
        return text.replace(REQUEST_ID_PLACEHOLDER, "").encode("utf-8")


def render_base(base_text: str, status_code: str) -> bytes:
    """Substitute a known status code into request-id-stripped template text."""
    return base_text.replace(STATUS_PLACEHOLDER, html.escape(status_code)).encode(
        "utf-8"
    )
