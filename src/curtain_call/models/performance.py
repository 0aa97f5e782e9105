# src/curtain_call/models/performance.py
"""SQLAlchemy model for performances."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from curtain_call.db.session import Base
from curtain_call.db.time import utcnow


class Performance(Base):
    """A staged performance that posts and wannas refer to.

    Performances are managed outside the posting flow and are read-only here.
    """

    __tablename__ = "performances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    venue: Mapped[str | None] = mapped_column(Text, nullable=True)
    performed_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
