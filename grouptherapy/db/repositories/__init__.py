"""
Per-domain repository modules for database access.

Every function takes a `Session` and issues a single statement against one
table; writes commit and refresh before returning the ORM row.
"""
