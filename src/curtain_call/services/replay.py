"""Single-use token bookkeeping backed by Redis or an in-process cache."""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from threading import Lock
from typing import Final

import redis

from curtain_call.core.settings import settings

logger = logging.getLogger(__name__)


class ReplayProtectionService:
    """Remember which form tokens have been issued and which were consumed.

    Each (subject, scope) keeps at most ``max_tokens`` outstanding token ids;
    issuing another evicts the oldest one.
    """

    def __init__(self, redis_url: str | None = None, *, max_tokens: int | None = None) -> None:
        self.max_tokens = settings.csrf_max_tokens if max_tokens is None else max_tokens
        self._redis = None
        url = redis_url if redis_url is not None else settings.redis_url
        if url:
            try:
                self._redis = redis.from_url(url)  # type: ignore[no-untyped-call]
            except (ValueError, redis.RedisError) as exc:
                logger.warning("Redis unavailable (%s); using in-process token store", exc)
                self._redis = None

    def register_token(self, subject: str, scope: str, token_id: str, ttl_seconds: int) -> None:
        """Record ``token_id`` as outstanding for the subject and scope."""
        key = f"csrf:{subject}:{scope}"
        if self._redis is not None:
            try:
                pipe = self._redis.pipeline()
                pipe.lpush(key, token_id)
                pipe.ltrim(key, 0, self.max_tokens - 1)
                pipe.expire(key, int(ttl_seconds))
                pipe.execute()
                return
            except redis.RedisError as exc:
                logger.warning("Redis error registering token: %s", exc)
                self._redis = None

        now = int(time.time())
        with _CACHE_LOCK:
            _prune_expired(now)
            issued = _TOKEN_CACHE[key]
            issued.insert(0, (token_id, now + int(ttl_seconds)))
            del issued[self.max_tokens:]
            if not issued:
                del _TOKEN_CACHE[key]

    def consume_token(self, subject: str, scope: str, token_id: str) -> bool:
        """Remove ``token_id`` if outstanding; return whether it was."""
        key = f"csrf:{subject}:{scope}"
        if self._redis is not None:
            try:
                return bool(self._redis.lrem(key, 1, token_id))
            except redis.RedisError as exc:
                logger.warning("Redis error consuming token: %s", exc)
                self._redis = None

        now = int(time.time())
        with _CACHE_LOCK:
            issued = _TOKEN_CACHE.get(key)
            if not issued:
                return False
            for index, (candidate, expiry) in enumerate(issued):
                if candidate == token_id:
                    del issued[index]
                    if not issued:
                        del _TOKEN_CACHE[key]
                    return expiry >= now
            return False


_TOKEN_CACHE: dict[str, list[tuple[str, int]]] = defaultdict(list)
_CACHE_LOCK: Final[Lock] = Lock()


def _prune_expired(now: int) -> None:
    # Callers hold _CACHE_LOCK.
    for key in list(_TOKEN_CACHE):
        live = [entry for entry in _TOKEN_CACHE[key] if entry[1] >= now]
        if live:
            _TOKEN_CACHE[key] = live
        else:
            del _TOKEN_CACHE[key]


def clear_local_cache() -> None:
    """Forget all tokens held in the in-process store."""
    with _CACHE_LOCK:
        _TOKEN_CACHE.clear()


def get_replay_service() -> ReplayProtectionService:
    """Return a replay protection service instance."""
    return ReplayProtectionService()
