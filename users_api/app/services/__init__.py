"""
Service layer abstraction.

The user store encapsulates all access to user records.  API handlers
depend only on the ``UserStore`` interface so the in‑memory and
SQLite implementations can be swapped per deployment.
"""
