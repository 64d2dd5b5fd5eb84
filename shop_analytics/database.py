"""
Database engine, session factory and declarative base
"""
import sqlite3
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import declarative_base, sessionmaker

from shop_analytics.config import settings
from shop_analytics.exceptions import DataSourceUnavailableError
from shop_analytics.logger import get_logger

log = get_logger(__name__)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine for the given URL with service defaults applied"""
    options = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_timeout"] = settings.DB_POOL_TIMEOUT
    options.update(kwargs)
    return create_engine(database_url, **options)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """FastAPI dependency yielding a session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None):
    """Create all tables that do not exist yet"""
    # Import models so they register on Base.metadata
    from shop_analytics import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    log.info("Database schema ready")


@contextmanager
def data_source_guard(operation: str):
    """
    Surface connectivity and timeout failures as DataSourceUnavailableError
    
    Other database errors propagate unchanged. Nothing is retried.
    """
    try:
        yield
    except (OperationalError, PoolTimeoutError) as e:
        log.error("%s failed, data source unavailable: %s", operation, e)
        raise DataSourceUnavailableError(f"Data source unavailable during {operation}") from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        log.error("%s failed, connection invalidated: %s", operation, e)
        raise DataSourceUnavailableError(f"Data source unavailable during {operation}") from e
