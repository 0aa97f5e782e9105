"""Data access helpers for working with posts."""
from __future__ import annotations

import logging

from sqlalchemy import delete, or_, select, update
from sqlalchemy.orm import Session

from curtain_call.models.post import Post
from curtain_call.models.user import Follow

__all__ = ["PostRepository"]

logger = logging.getLogger(__name__)


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def fetch_all_by_user(self, user_id: int) -> list[Post]:
        """Return every post written by ``user_id``, newest first."""
        result = self.session.execute(
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(result.scalars().unique())

    def fetch_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        result = self.session.execute(select(Post).where(Post.id == post_id))
        return result.scalars().first()

    def insert(self, user_id: int, contents: str, performance_id: int) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(user_id=user_id, contents=contents, performance_id=performance_id)
        self.session.add(post)
        self.session.flush()
        logger.debug("Inserted post %s for user %s", post.id, user_id)
        return post

    def update(self, post_id: int, contents: str) -> None:
        """Overwrite the contents of a post; other columns are immutable."""
        self.session.execute(
            update(Post).where(Post.id == post_id).values(contents=contents)
        )
        self.session.flush()

    def delete(self, post_id: int) -> None:
        """Delete a post by identifier. Missing ids are a no-op."""
        self.session.execute(delete(Post).where(Post.id == post_id))
        self.session.flush()

    def fetch_timeline(self, user_id: int) -> list[Post]:
        """Return posts by ``user_id`` and by the users they follow, newest first."""
        followed = select(Follow.following_id).where(Follow.user_id == user_id)
        result = self.session.execute(
            select(Post)
            .where(or_(Post.user_id == user_id, Post.user_id.in_(followed)))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(result.scalars().unique())
