"""
Application factory.

Creates the FastAPI application and wires together:
- The template source and the pre-rendered page cache
- The catch-all page router
- Error handlers (every failure still renders a page)
- Logging configuration

The cache is built here, before any server accepts connections, and is
read-only from then on. No rendering logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from errorpages.core.config import Settings, settings as default_settings
from errorpages.domain.pages.cache import build_page_cache
from errorpages.domain.pages.ports import TemplateSource
from errorpages.infrastructure.pages.template_source import get_template_source
from errorpages.interfaces.pages.router import router as pages_router
from errorpages.shared.errors.handlers import register_error_handlers
from errorpages.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    template_source: Optional[TemplateSource] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the service.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        template_source: Template source to use instead of the configured one.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        TemplateNotFoundError: If a configured template file cannot be read.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    source = template_source or get_template_source(settings.template_path)
    page_cache = build_page_cache(source.load())

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.page_cache = page_cache

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(pages_router)

    return app
