# src/curtain_call/models/wanna.py
"""Model recording a user's interest in a performance."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from curtain_call.db.session import Base
from curtain_call.db.time import utcnow


class Wanna(Base):
    """Presence of a row means the user wants to see the performance.

    There is no unique constraint on (user_id, performance_id);
    callers check ``WannaRepository.exists`` before inserting.
    """

    __tablename__ = "wannas"
    __table_args__ = (
        Index("ix_wannas_user_id_performance_id", "user_id", "performance_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    performance_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("performances.id", ondelete="CASCADE"),
        nullable=False,
    )
    wanted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
