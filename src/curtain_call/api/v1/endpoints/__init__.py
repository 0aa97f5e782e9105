# src/curtain_call/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .performances import router as performances_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "performances_router",
    "posts_router",
    "users_router",
]
