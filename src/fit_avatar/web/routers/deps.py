"""Shared router dependencies."""

from fastapi import Request

from ...db import AppStateRepository


def get_repository(request: Request) -> AppStateRepository:
    """Get the state repository from app state."""
    return request.app.state.repository
