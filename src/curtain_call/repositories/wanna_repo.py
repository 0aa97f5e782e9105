"""Data access helpers for a user's interest in performances."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from curtain_call.db.time import utcnow
from curtain_call.models.wanna import Wanna

__all__ = ["WannaRepository"]

logger = logging.getLogger(__name__)


class WannaRepository:
    """Existence-only relation between users and performances.

    The repository does not deduplicate: inserting the same pair twice stores
    two rows, and ``exists`` stays true until ``delete`` removes them all.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def insert(self, user_id: int, performance_id: int) -> None:
        """Record that ``user_id`` wants to see ``performance_id`` as of now."""
        self.session.add(
            Wanna(user_id=user_id, performance_id=performance_id, wanted_at=utcnow())
        )
        self.session.flush()
        logger.debug("User %s wants performance %s", user_id, performance_id)

    def delete(self, user_id: int, performance_id: int) -> None:
        """Remove every row for the pair."""
        self.session.execute(
            delete(Wanna).where(
                Wanna.user_id == user_id,
                Wanna.performance_id == performance_id,
            )
        )
        self.session.flush()

    def exists(self, user_id: int, performance_id: int) -> bool:
        """Return True if at least one row exists for the pair."""
        count = self.session.execute(
            select(func.count(Wanna.id)).where(
                Wanna.user_id == user_id,
                Wanna.performance_id == performance_id,
            )
        ).scalar_one()
        return count > 0
