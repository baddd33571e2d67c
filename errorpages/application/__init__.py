"""
Application layer package.

Use cases orchestrating the domain. No HTTP concerns.
"""
