"""
ASGI entry point.

Run with any ASGI server, e.g. ``uvicorn errorpages.main:app``.
Configuration comes from the environment only; use ``errorpages.cli``
for command-line flags.
"""

from errorpages.factory import create_app

app = create_app()
