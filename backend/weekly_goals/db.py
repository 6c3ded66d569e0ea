import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from weekly_goals.core.config import settings
from weekly_goals.core.errors import StoreFailure

logger = logging.getLogger(__name__)

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def _engine_kwargs(url: str) -> dict:
    kwargs: dict = {"pool_pre_ping": True}  # helps avoid stale connections
    if url.startswith("sqlite"):
        # Requests are served from a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            # Share the single in-memory database across sessions
            kwargs["poolclass"] = StaticPool
    return kwargs


# Create SQLAlchemy engine (connects to Postgres)
engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))


if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless this is switched on
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Factory that creates DB sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency we will use in FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, action: str):
    """Commit the work done in the block, or roll back and raise StoreFailure.

    `action` completes the sentence "Failed to ..." in the error message.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store failure while trying to %s", action)
        raise StoreFailure(f"Failed to {action}") from exc
