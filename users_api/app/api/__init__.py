"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a ``build_router`` function
that returns a router with all of its endpoints.
"""
