"""Access token helpers for the signed session carried by each request."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from curtain_call.core.settings import settings
from curtain_call.schemas.post import MAX_ID


def create_access_token(user_id: int, extra_claims: dict[str, Any] | None = None) -> str:
    """Create a JWT access token identifying ``user_id``."""
    to_encode: dict[str, Any] = {"sub": str(user_id)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> int | None:
    """Return the user id carried by ``token``, or None when it is not valid."""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        return None
    if not 1 <= user_id <= MAX_ID:
        return None
    return user_id
