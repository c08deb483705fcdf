"""Database engine, session factory and declarative base.

PostgreSQL in production, SQLite for local development and tests.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from campus_events.config import settings


def build_engine(url: str, echo: bool = False):
    """Create an engine with per-dialect connection options."""
    engine_kwargs = {"echo": echo}
    if url.startswith("postgresql"):
        engine_kwargs["pool_pre_ping"] = True
    elif url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    new_engine = create_engine(url, **engine_kwargs)

    if url.startswith("sqlite"):
        # SQLite only honors ON DELETE CASCADE with foreign keys switched on
        @event.listens_for(new_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all ORM models."""


def get_db():
    """FastAPI dependency yielding a session that is always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
