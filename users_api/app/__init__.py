"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` (configuration, logging, database, exceptions), ``schemas``
(request and response models), ``services`` (user stores) and ``api``
(versioned routers).
"""

from .main import app  # noqa: F401
