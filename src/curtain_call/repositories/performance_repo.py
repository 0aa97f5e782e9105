"""Read-only access to performances."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from curtain_call.models.performance import Performance

__all__ = ["PerformanceRepository"]


class PerformanceRepository:
    """Lookups used to build post forms and performance pages."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_all(self) -> list[Performance]:
        """Return every performance, most recent stage date first."""
        result = self.session.execute(
            select(Performance).order_by(
                Performance.performed_on.desc(),
                Performance.id.desc(),
            )
        )
        return list(result.scalars())

    def fetch_by_id(self, performance_id: int) -> Performance | None:
        """Return a performance by identifier."""
        return self.session.get(Performance, performance_id)
