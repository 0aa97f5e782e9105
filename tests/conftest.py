# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["REDIS_URL"] = ""

from curtain_call.core.security import create_access_token
from curtain_call.db.session import Base
from curtain_call.db.session import get_db as app_get_session
from curtain_call.main import app as fastapi_app
from curtain_call.models import Follow, Performance, Post, User
from curtain_call.services.replay import ReplayProtectionService, clear_local_cache
from curtain_call.services.session import RequestSession

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Commits inside the app become savepoints of the outer transaction.
    session = Session(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture(autouse=True)
def clear_token_store() -> Iterator[None]:
    clear_local_cache()
    yield
    clear_local_cache()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test", follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture()
def replay_service() -> ReplayProtectionService:
    return ReplayProtectionService(redis_url="")


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Create and return a persisted test user."""
    user = User(name="hanako")
    db_session.add(user)
    db_session.flush()
    return user


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Create and return a second persisted user."""
    user = User(name="taro")
    db_session.add(user)
    db_session.flush()
    return user


@pytest.fixture()
def stranger(db_session: Session) -> User:
    """A user nobody in the tests follows."""
    user = User(name="jiro")
    db_session.add(user)
    db_session.flush()
    return user


@pytest.fixture()
def follows_other(db_session: Session, test_user: User, other_user: User) -> Follow:
    follow = Follow(user_id=test_user.id, following_id=other_user.id)
    db_session.add(follow)
    db_session.flush()
    return follow


@pytest.fixture()
def performance(db_session: Session) -> Performance:
    """Create a performance posts can refer to."""
    performance = Performance(
        title="Hamlet",
        venue="New National Theatre",
        performed_on=date(2026, 9, 12),
    )
    db_session.add(performance)
    db_session.flush()
    return performance


@pytest.fixture()
def other_performance(db_session: Session) -> Performance:
    performance = Performance(title="The Cherry Orchard", venue="Setagaya Public Theatre")
    db_session.add(performance)
    db_session.flush()
    return performance


@pytest.fixture()
def test_post(db_session: Session, test_user: User, performance: Performance) -> Post:
    """Create a baseline post for tests."""
    post = Post(user_id=test_user.id, performance_id=performance.id, contents="Moving staging.")
    db_session.add(post)
    db_session.flush()
    return post


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture()
def user_session(test_user: User) -> RequestSession:
    return RequestSession.for_user(test_user.id, test_user.name)
