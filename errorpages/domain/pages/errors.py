"""
Domain-specific errors for error page rendering.

All errors raised from the domain layer must be defined here.
No framework imports allowed.
"""


class ErrorPagesError(Exception):
    """Base error for all error page domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TemplateNotFoundError(ErrorPagesError):
    """Raised when the page template cannot be read at startup."""

    def __init__(self, location: str) -> None:
        super().__init__(f"Page template not found: {location}")
        self.location = location
