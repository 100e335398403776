"""
Urban Farm Share API package.

Provides the FastAPI application for the urban farm space marketplace.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
