# src/curtain_call/models/__init__.py
"""SQLAlchemy models for the Curtain Call application."""

from .performance import Performance
from .post import Post
from .user import Follow, User
from .wanna import Wanna

__all__ = [
    "Follow",
    "Performance",
    "Post",
    "User",
    "Wanna",
]
