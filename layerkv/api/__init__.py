"""HTTP front end for layerkv."""

from .app import create_app
from .routes import router, validate_key

__all__ = ["create_app", "router", "validate_key"]
