"""
Database session management for Linkshelf
SQLAlchemy engine, session factory and declarative base
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from linkshelf.config import settings

# SQLite sessions cross threads under FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Create database engine
# pool_pre_ping: Verify connections before using them
# echo: Log all SQL statements when DEBUG=True
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
    connect_args=connect_args
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all models
Base = declarative_base()


def get_db():
    """
    Dependency for FastAPI endpoints to get database session
    Automatically closes session after request

    Rolls back on exceptions so a failed request never leaves
    a half-applied transaction on the connection
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables():
    """
    Create all tables in the database
    Called during application startup

    Note: Import models here to ensure they're registered with Base.metadata
    """
    from linkshelf.models import User, APIKey, Collection, Link  # noqa: F401

    Base.metadata.create_all(bind=engine)


def utcnow() -> datetime:
    """Timezone-aware current time used for every created_at/updated_at column"""
    return datetime.now(timezone.utc)
