"""
Pytest configuration and shared fixtures for Linkshelf tests

Provides:
- In-memory SQLite database per test (real SQLAlchemy sessions, no mocks)
- Test users, collections and links with explicit timestamps
- A controllable clock for the catalog cache
- A FastAPI TestClient authenticated as the test user
"""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from typing import Callable, Generator, Optional
from uuid import uuid4
from datetime import datetime, timedelta, timezone
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from linkshelf.database import Base
from linkshelf.models.user import User
from linkshelf.models.collection import Collection
from linkshelf.models.link import Link
from linkshelf.services.catalog_cache import PublicCatalogCache


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock stand-in that only moves when told to"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def test_db_engine():
    """Create in-memory SQLite database (fast, isolated per test)"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_db_engine) -> Generator[Session, None, None]:
    """Database session bound to the per-test engine"""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def update_statements(test_db_engine):
    """Record every UPDATE statement sent to the database"""
    statements = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("UPDATE"):
            statements.append(statement)

    event.listen(test_db_engine, "before_cursor_execute", before_cursor_execute)
    yield statements
    event.remove(test_db_engine, "before_cursor_execute", before_cursor_execute)


@pytest.fixture
def test_user(db_session) -> User:
    """Create a test user"""
    user = User(
        id=str(uuid4()),
        email="reader@linkshelf.dev",
        name="Reader",
        is_active=True
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session) -> User:
    """Create a second user who owns nothing the test user can touch"""
    user = User(
        id=str(uuid4()),
        email="other@linkshelf.dev",
        name="Other",
        is_active=True
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def make_collection(db_session) -> Callable[..., Collection]:
    """Factory for committed collections with explicit order and timestamp"""

    def _make(
        user: User,
        name: str = "Collection",
        description: Optional[str] = None,
        is_public: bool = False,
        order: int = 0,
        updated_at: Optional[datetime] = None,
        id: Optional[str] = None,
    ) -> Collection:
        collection = Collection(
            id=id or str(uuid4()),
            user_id=user.id,
            name=name,
            description=description,
            is_public=is_public,
            order=order,
            created_at=BASE_TIME,
            updated_at=updated_at or BASE_TIME,
        )
        db_session.add(collection)
        db_session.commit()
        db_session.refresh(collection)
        return collection

    return _make


@pytest.fixture
def make_link(db_session) -> Callable[..., Link]:
    """Factory for committed links"""

    def _make(
        collection: Collection,
        url: str = "https://example.com",
        name: str = "Example",
        order: int = 1,
        comment: Optional[str] = None,
    ) -> Link:
        link = Link(
            id=str(uuid4()),
            collection_id=collection.id,
            url=url,
            name=name,
            comment=comment,
            order=order,
            created_at=BASE_TIME,
            updated_at=BASE_TIME,
        )
        db_session.add(link)
        db_session.commit()
        db_session.refresh(link)
        return link

    return _make


@pytest.fixture
def test_collection(make_collection, test_user) -> Collection:
    """Create a private test collection"""
    return make_collection(test_user, name="Reading list", description="Things to read")


@pytest.fixture
def public_collection(make_collection, test_user) -> Collection:
    """Create a public test collection"""
    return make_collection(
        test_user,
        name="Python tooling",
        description="Linters, formatters and test runners",
        is_public=True,
        order=1,
        updated_at=BASE_TIME + timedelta(hours=1),
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    """Controllable clock for cache TTL tests"""
    return FakeClock()


@pytest.fixture
def catalog_cache(fake_clock) -> PublicCatalogCache:
    """Enabled catalog cache driven by the fake clock"""
    return PublicCatalogCache(ttl_seconds=60, max_entries=500, enabled=True, clock=fake_clock)


@pytest.fixture
def client(db_session, test_user, catalog_cache):
    """
    TestClient authenticated as test_user

    The database session and catalog cache are the test's own,
    so assertions can inspect both directly.
    """
    from fastapi.testclient import TestClient
    from linkshelf.main import app
    from linkshelf.database import get_db
    from linkshelf.api.deps import get_current_user, get_catalog_cache

    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_current_user] = lambda: test_user
    app.dependency_overrides[get_catalog_cache] = lambda: catalog_cache

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(db_session, catalog_cache):
    """TestClient with the real API key authentication"""
    from fastapi.testclient import TestClient
    from linkshelf.main import app
    from linkshelf.database import get_db
    from linkshelf.api.deps import get_catalog_cache

    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_catalog_cache] = lambda: catalog_cache

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for API endpoints"
    )
