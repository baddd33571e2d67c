"""
Infrastructure layer package.

Adapters implementing domain ports. Here: where the template comes from.
"""
