"""Data access helpers for users."""
from __future__ import annotations

from sqlalchemy.orm import Session

from curtain_call.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)
