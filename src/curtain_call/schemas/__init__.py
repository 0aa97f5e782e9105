# src/curtain_call/schemas/__init__.py
"""Pydantic schemas for the Curtain Call views."""

from .performance import PerformanceResponse
from .post import PostForm, PostResponse
from .user import UserResponse

__all__ = [
    "PerformanceResponse",
    "PostForm",
    "PostResponse",
    "UserResponse",
]
