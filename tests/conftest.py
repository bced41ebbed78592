# tests/conftest.py
from __future__ import annotations

import json
import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

TEST_SECRET = "test-session-secret"
os.environ.setdefault("SESSION_SECRET", TEST_SECRET)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault(
    "BOOTSTRAP_USERS_JSON",
    json.dumps(
        [
            {
                "username": "admin",
                "password": "admin-pass",
                "role": "superadmin",
                "displayName": "City Admin",
            }
        ]
    ),
)

from pothole_watch.api.v1.dependencies import get_session_codec
from pothole_watch.core.session_tokens import SessionTokenCodec, SessionUser
from pothole_watch.db.session import Base
from pothole_watch.db.session import get_db as app_get_session
from pothole_watch.db.time import utcnow
from pothole_watch.main import app as fastapi_app
from pothole_watch.models import Report

TEST_DB_URL = "sqlite://"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-pass"


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


@pytest.fixture(scope="session")
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(engine: Engine, session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(
    app: FastAPI,
    db_session: Session,
    session_factory: sessionmaker[Session],
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

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
def codec() -> SessionTokenCodec:
    return get_session_codec()


@pytest.fixture()
def user_token(codec: SessionTokenCodec) -> str:
    """Session token for an ordinary signed-in user."""
    return codec.encode(SessionUser(username="alice", role="user", display_name="Alice"))


@pytest.fixture()
def admin_token(codec: SessionTokenCodec) -> str:
    """Session token for a superadmin."""
    return codec.encode(SessionUser(username=ADMIN_USERNAME, role="superadmin"))


@pytest.fixture()
def make_report(db_session: Session) -> Callable[..., Report]:
    """Return a factory persisting reports with sensible defaults."""

    def _make(**overrides: object) -> Report:
        fields: dict[str, object] = {
            "title": "Crater on Ring Road",
            "description": "Deep hole near the bus stop",
            "latitude": 27.7172,
            "longitude": 85.3240,
            "department": "Department of Roads",
            "severity": "high",
            "status": "reported",
            "upvotes": 0,
            "downvotes": 0,
            "report_time": utcnow() - timedelta(hours=1),
        }
        fields.update(overrides)
        report = Report(**fields)
        db_session.add(report)
        db_session.commit()
        db_session.refresh(report)
        return report

    return _make


@pytest.fixture()
def test_report(make_report: Callable[..., Report]) -> Report:
    """Create a baseline report for tests."""
    return make_report()


def fetch_report(db_session: Session, report_id: str) -> Report:
    """Read a report fresh from the database, bypassing the identity map."""
    db_session.expire_all()
    report = db_session.get(Report, report_id)
    assert report is not None
    return report
