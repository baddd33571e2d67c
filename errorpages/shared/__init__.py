"""
Shared module package.

Contains cross-cutting concerns:
- Error handling
- Logging configuration
"""
