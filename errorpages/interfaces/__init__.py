"""
Interfaces layer package.

Contains the FastAPI router and its dependencies. No rendering logic
belongs here; routes call the use case and return its bytes.
"""
