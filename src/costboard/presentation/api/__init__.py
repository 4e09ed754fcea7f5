"""REST API presentation layer for Costboard.

This package provides a FastAPI-based REST API serving the billing fixtures.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception to HTTP mapping
    └── routers/              # API route handlers
"""

from costboard.presentation.api.app import create_app

__all__ = ["create_app"]
