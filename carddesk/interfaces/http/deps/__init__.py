"""Reusable FastAPI dependencies."""

from .auth import get_current_claims, require_permission
from .database import get_app_settings, get_container, get_db_session

__all__ = [
    "get_app_settings",
    "get_container",
    "get_current_claims",
    "get_db_session",
    "require_permission",
]
