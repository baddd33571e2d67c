"""
Shared error handling package.

Every failure that reaches the HTTP layer is still answered with a
rendered page and status 200.
"""
