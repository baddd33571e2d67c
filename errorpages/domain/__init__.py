"""
Domain layer package.

Pure rendering logic: template substitution and the page cache.
No framework imports and no IO.
"""
