"""
Logging configuration for the service.

Logging must not change program behavior. Requests are not logged;
the only lines the service writes itself are startup and failure lines.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.INFO


def resolve_level(level: str) -> int | None:
    """Map a level name such as ``"debug"`` to its numeric value.

    Returns None for names the logging module does not know.
    """
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else None


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the service.

    An unknown level name falls back to INFO and is reported once
    configured, so a typo in LOG_LEVEL does not go unnoticed.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    resolved = resolve_level(level)
    logging.basicConfig(
        level=resolved if resolved is not None else DEFAULT_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    if resolved is None:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using INFO", level
        )

    # Access lines would duplicate the proxy's own log. uvicorn.error stays
    # at WARNING so bind failures are still reported.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
