"""Per-request session passed explicitly to the actions that need it."""

from __future__ import annotations

from typing import Any


class RequestSession:
    """Read-only view of the values known about the current request.

    The ``"user"`` key holds ``{"id": ..., "name": ...}`` for an authenticated
    request and is absent otherwise.
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    @property
    def user(self) -> dict[str, Any] | None:
        return self._values.get("user")

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @classmethod
    def for_user(cls, user_id: int, name: str) -> RequestSession:
        return cls({"user": {"id": user_id, "name": name}})
