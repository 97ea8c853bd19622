"""JSON API for fit-avatar."""

from .app import create_app

__all__ = ["create_app"]
