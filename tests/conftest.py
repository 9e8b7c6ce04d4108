"""Shared fixtures: one SQLite file for the run, rows wiped between tests."""
from __future__ import annotations

import os
import tempfile
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete
from sqlalchemy.orm import Session

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_linkup.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="linkup-media-"))

from linkup.database import Base, create_session, get_engine  # noqa: E402
from linkup.main import app  # noqa: E402
from linkup.models import (  # noqa: E402
    AuthCredential,
    Comment,
    Follow,
    FriendRequest,
    Friendship,
    Post,
    PostLike,
    Story,
    User,
)
from linkup.services import create_access_token  # noqa: E402

_TABLES_IN_DELETE_ORDER = (
    PostLike,
    Comment,
    Post,
    Story,
    Follow,
    FriendRequest,
    Friendship,
    AuthCredential,
    User,
)


@pytest.fixture(scope="session", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=get_engine())
    yield
    Base.metadata.drop_all(bind=get_engine())


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    yield
    with create_session() as session:
        for model in _TABLES_IN_DELETE_ORDER:
            session.execute(delete(model))
        session.commit()
    app.dependency_overrides.clear()


@pytest.fixture
def db() -> Iterator[Session]:
    session = create_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db: Session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make(**fields) -> User:
        counter["n"] += 1
        fields.setdefault("email", f"user{counter['n']}@example.com")
        fields.setdefault("first_name", f"User{counter['n']}")
        fields.setdefault("last_name", "Tester")
        user = User(**fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers
