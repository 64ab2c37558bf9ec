"""
Top‑level package for the Users API.

This file makes ``users_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``users_api.app.main``.  The HTTP client for the API lives in
``users_api.client``.
"""

__all__ = []
