"""
Database engine and session factory for the record store.

Uses SQLAlchemy for ORM operations. The default URL is an in-memory
SQLite database shared through a single static connection, so records
last for the lifetime of the running process and no longer.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from roster.config import DATABASE_URL


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def make_engine(url: str = DATABASE_URL):
    """
    Create an engine for the given URL.

    SQLite engines allow cross-thread use (FastAPI runs sync routes in a
    threadpool). In-memory SQLite additionally pins a single connection,
    otherwise every new connection would see an empty database.
    """
    engine_kwargs = {"echo": False}

    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    elif url.startswith("postgresql"):
        engine_kwargs.update({
            "pool_size": 5,
            "pool_pre_ping": True,
        })

    engine = create_engine(url, **engine_kwargs)

    if url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_tables(engine):
    """Create all tables on the given engine."""
    # Register models with Base.metadata
    from roster.models import Student  # noqa: F401

    Base.metadata.create_all(bind=engine)


def build_session_factory(url: str = DATABASE_URL) -> sessionmaker:
    """
    Build a ready-to-use session factory: engine, tables, sessionmaker.

    Every call against an in-memory URL yields a fresh, empty database.
    """
    engine = make_engine(url)
    create_tables(engine)
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
