# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from content_graph.core.settings import settings
from content_graph.db.session import Base, enable_sqlite_savepoints
from content_graph.db.session import get_db as app_get_session
from content_graph.main import app as fastapi_app
from content_graph.models import Follow, Post, User, Visibility

TEST_DB_URL = "sqlite://"

_USER_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_savepoints(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    # Services commit through unit_of_work, so rows are cleared after each test.
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
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


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with unique display names."""

    def _make_user(display_name: str | None = None) -> User:
        user = User(display_name=display_name or f"user{next(_USER_COUNTER)}")
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def follow(db_session: Session) -> Callable[[User, User], Follow]:
    """Return a helper that records ``follower`` following ``followee``."""

    def _follow(follower: User, followee: User) -> Follow:
        edge = Follow(follower_id=follower.id, followee_id=followee.id)
        db_session.add(edge)
        db_session.commit()
        return edge

    return _follow


@pytest.fixture()
def alice(make_user) -> User:
    return make_user("alice")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user("bob")


@pytest.fixture()
def carol(make_user) -> User:
    return make_user("carol")


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Insert a post row directly, bypassing hashtag and mention linking."""

    def _make_post(
        author: User,
        content: str = "hello",
        visibility: Visibility = Visibility.PUBLIC,
        **fields,
    ) -> Post:
        post = Post(author_id=author.id, content=content, visibility=visibility, **fields)
        db_session.add(post)
        db_session.commit()
        return post

    return _make_post


def create_access_token(user_id: int) -> str:
    """Issue a bearer token the API accepts for ``user_id``."""
    return jwt.encode({"sub": str(user_id)}, settings.secret_key, algorithm=settings.jwt_algorithm)


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Return a helper building authorization headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers
