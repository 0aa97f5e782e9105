# src/curtain_call/models/post.py
"""SQLAlchemy model for posts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from curtain_call.db.session import Base
from curtain_call.db.time import utcnow
from curtain_call.models.performance import Performance
from curtain_call.models.user import User


class Post(Base):
    """A user's short impression of a performance.

    Only ``contents`` changes after creation.
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    performance_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("performances.id"),
        nullable=False,
    )
    # Length is enforced by the posts flow, not by the column.
    contents: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Loaded with the post so listings can show author and title.
    user: Mapped[User] = relationship("User", lazy="joined")
    performance: Mapped[Performance] = relationship("Performance", lazy="joined")
