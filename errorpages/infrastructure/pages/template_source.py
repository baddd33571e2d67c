"""
Template source adapters.

The default template ships inside the package as data. A deployment can
point TEMPLATE_PATH at its own HTML file instead.
"""

import logging
from importlib import resources
from pathlib import Path

from errorpages.domain.pages.errors import TemplateNotFoundError
from errorpages.domain.pages.ports import TemplateSource
from errorpages.domain.pages.template import PageTemplate

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "errorpages"
BUNDLED_RESOURCE = "templates/index.html"


class PackagedTemplateSource(TemplateSource):
    """Loads the template bundled with the package."""

    def __init__(
        self, package: str = BUNDLED_PACKAGE, resource: str = BUNDLED_RESOURCE
    ) -> None:
        self._package = package
        self._resource = resource

    def load(self) -> PageTemplate:
        text = (
            resources.files(self._package)
            .joinpath(self._resource)
            .read_text(encoding="utf-8")
        )
        logger.debug("Loaded bundled template %s/%s", self._package, self._resource)
        return PageTemplate(text=text)


class FileTemplateSource(TemplateSource):
    """Loads the template from a file on disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def load(self) -> PageTemplate:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateNotFoundError(str(self._path)) from exc
        logger.info("Loaded template from %s", self._path)
        return PageTemplate(text=text)


def get_template_source(template_path: Path | None = None) -> TemplateSource:
    """Pick the file override when configured, the bundled template otherwise."""
    if template_path is not None:
        return FileTemplateSource(template_path)
    return PackagedTemplateSource()
