# src/curtain_call/services/__init__.py
"""Business logic services for the Curtain Call application."""

from .csrf import CsrfTokenService
from .post_validation import validate_contents
from .replay import ReplayProtectionService
from .session import RequestSession

__all__ = [
    "CsrfTokenService",
    "ReplayProtectionService",
    "RequestSession",
    "validate_contents",
]
