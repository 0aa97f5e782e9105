"""Shared API dependencies for sessions, repositories and form tokens."""

from typing import Annotated, Any

from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from curtain_call.api.v1.responder import not_found
from curtain_call.core.security import decode_access_token
from curtain_call.core.settings import settings
from curtain_call.db.session import get_db
from curtain_call.repositories.performance_repo import PerformanceRepository
from curtain_call.repositories.post_repo import PostRepository
from curtain_call.repositories.user_repo import UserRepository
from curtain_call.repositories.wanna_repo import WannaRepository
from curtain_call.schemas.post import MAX_ID
from curtain_call.services.csrf import CsrfTokenService
from curtain_call.services.replay import ReplayProtectionService, get_replay_service
from curtain_call.services.session import RequestSession

# Bearer header is optional; browsers send the session cookie instead
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

# Ids in the URL; anything outside the stored range is answered with 404
EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_request_session(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> RequestSession:
    """Build the session for this request from its access token.

    A missing, invalid or expired token, or one naming an unknown user, yields
    an anonymous session rather than an error.
    """
    token = (
        credentials.credentials
        if credentials is not None
        else request.cookies.get(settings.session_cookie_name)
    )
    if not token:
        return RequestSession()

    user_id = decode_access_token(token)
    if user_id is None:
        return RequestSession()

    user = UserRepository(db).fetch_by_id(user_id)
    if user is None:
        return RequestSession()
    return RequestSession.for_user(user.id, user.name)


RequestSessionDep = Annotated[RequestSession, Depends(get_request_session)]


def get_current_user(session: RequestSessionDep) -> dict[str, Any]:
    """Return the session user, answering 404 for anonymous requests."""
    user = session.user
    if user is None:
        not_found()
    return user


CurrentUserDep = Annotated[dict[str, Any], Depends(get_current_user)]


def get_replay_service_dep() -> ReplayProtectionService:
    return get_replay_service()


ReplayServiceDep = Annotated[ReplayProtectionService, Depends(get_replay_service_dep)]


def get_csrf_service(session: RequestSessionDep, replay: ReplayServiceDep) -> CsrfTokenService:
    return CsrfTokenService(session, replay)


CsrfDep = Annotated[CsrfTokenService, Depends(get_csrf_service)]


def get_post_repo(db: SessionDep) -> PostRepository:
    return PostRepository(db)


def get_performance_repo(db: SessionDep) -> PerformanceRepository:
    return PerformanceRepository(db)


def get_user_repo(db: SessionDep) -> UserRepository:
    return UserRepository(db)


def get_wanna_repo(db: SessionDep) -> WannaRepository:
    return WannaRepository(db)


PostRepoDep = Annotated[PostRepository, Depends(get_post_repo)]
PerformanceRepoDep = Annotated[PerformanceRepository, Depends(get_performance_repo)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repo)]
WannaRepoDep = Annotated[WannaRepository, Depends(get_wanna_repo)]
