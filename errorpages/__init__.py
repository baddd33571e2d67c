"""
Error Pages — custom HTTP error pages for a reverse proxy.

Application package root. The proxy forwards failed responses here and
the service renders a single HTML template for the status code encoded
in the request path.

Layers:
    - domain: Template, pre-rendered page cache, errors.
    - application: The serve-page use case.
    - infrastructure: Template sources (bundled package data, file override).
    - interfaces: FastAPI router and dependencies.
    - shared: Cross-cutting concerns (errors, logging).
"""
