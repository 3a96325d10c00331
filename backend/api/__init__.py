"""
Users API package.

Provides the FastAPI application for the users resource.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
