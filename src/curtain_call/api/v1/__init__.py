# src/curtain_call/api/v1/__init__.py
"""Version 1 routes."""

from .endpoints import (
    performances_router,
    posts_router,
    users_router,
)

__all__ = [
    "performances_router",
    "posts_router",
    "users_router",
]
