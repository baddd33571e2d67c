"""
Port interfaces (ABCs) for error page rendering.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from errorpages.domain.pages.template import PageTemplate


class TemplateSource(ABC):
    """Port for loading the page template."""

    @abstractmethod
    def load(self) -> PageTemplate:
        """Read the template text.

        Raises:
            TemplateNotFoundError: If the template cannot be read.
        """
        raise NotImplementedError
