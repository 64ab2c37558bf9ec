"""Endpoint modules for API v1, one per resource."""
