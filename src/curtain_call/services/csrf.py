"""Anti-forgery tokens scoped to a single form."""

from __future__ import annotations

import logging
import secrets
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from curtain_call.core.settings import settings
from curtain_call.services.replay import ReplayProtectionService
from curtain_call.services.session import RequestSession

logger = logging.getLogger(__name__)

ANONYMOUS_SUBJECT = "anonymous"


class CsrfTokenService:
    """Issue and check form tokens for the session user.

    A token is a signed JWT naming its scope (for example ``"posts/new"``) and
    the session user. It is accepted once: verifying it consumes its id.
    """

    def __init__(
        self,
        session: RequestSession,
        replay: ReplayProtectionService,
        *,
        ttl_seconds: int | None = None,
    ) -> None:
        self.session = session
        self.replay = replay
        self.ttl_seconds = (
            settings.csrf_token_ttl_seconds if ttl_seconds is None else ttl_seconds
        )

    @property
    def subject(self) -> str:
        user = self.session.user
        return str(user["id"]) if user else ANONYMOUS_SUBJECT

    def generate(self, scope: str) -> str:
        """Return a fresh token for ``scope``."""
        token_id = secrets.token_hex(16)
        expire = datetime.now(UTC) + timedelta(seconds=self.ttl_seconds)
        token: str = jwt.encode(
            {"sub": self.subject, "scope": scope, "jti": token_id, "exp": expire},
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )
        self.replay.register_token(self.subject, scope, token_id, self.ttl_seconds)
        return token

    def verify(self, scope: str, token: str | None) -> bool:
        """Return True if ``token`` was issued for ``scope`` to this user and is unused."""
        if not token:
            return False
        try:
            payload = jwt.decode(
                token,
                settings.secret_key,
                algorithms=[settings.jwt_algorithm],
            )
        except JWTError:
            logger.info("Rejected malformed or expired token for %s", scope)
            return False

        if payload.get("scope") != scope or payload.get("sub") != self.subject:
            logger.info("Rejected token issued for another form or user (%s)", scope)
            return False

        token_id = payload.get("jti")
        if not isinstance(token_id, str):
            return False
        if not self.replay.consume_token(self.subject, scope, token_id):
            logger.info("Rejected reused token for %s", scope)
            return False
        return True
