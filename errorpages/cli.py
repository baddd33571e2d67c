"""
Command-line entry point.

Usage:
    # Serve on the port from PORT (default 80)
    python -m errorpages

    # Serve on an explicit port
    python -m errorpages --port 8080

Precedence for every option: command-line flag, then environment
variable, then .env file, then the built-in default.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

import uvicorn

from errorpages.core.config import Settings
from errorpages.domain.pages.errors import ErrorPagesError
from errorpages.factory import create_app
from errorpages.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="error-pages",
        description="Serve custom HTTP error pages for a reverse proxy",
    )
    parser.add_argument(
        "--port", type=int, default=None,
        help="Server port (overrides PORT, default 80)",
    )
    parser.add_argument(
        "--host", default=None,
        help="Interface to bind (overrides HOST, default 0.0.0.0)",
    )
    parser.add_argument(
        "--log-level", default=None, dest="log_level",
        help="DEBUG, INFO, WARNING or ERROR (overrides LOG_LEVEL)",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge flags over the environment-loaded settings.

    Flags left unset fall through to the environment and defaults.
    """
    overrides = {
        name: value
        for name, value in vars(args).items()
        if name in Settings.model_fields and value is not None
    }
    return Settings(**overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    configure_logging(level=settings.log_level)

    try:
        app = create_app(settings)
    except ErrorPagesError as exc:
        logger.error("Startup failed: %s", exc.message)
        sys.exit(1)

    logger.info(
        "Error Pages Service started on %s:%d (PID: %d)",
        settings.host, settings.port, os.getpid(),
    )
    # log_config=None keeps the logging set up above. A bind failure is
    # logged by uvicorn itself, which then exits with status 1.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
