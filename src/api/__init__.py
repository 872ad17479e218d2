"""
API module for FastAPI routes.

Exposes create_app(); route modules live in api.routes.
"""

from api.app import create_app

__all__ = ["create_app"]
