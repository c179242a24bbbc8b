"""Database engine and session factory for the SQLAlchemy car repository."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from car_catalog.infrastructure.config.settings import settings

# Engine creation is deferred until needed so the in-memory repository works without a database
_engine = None
_SessionLocal = None


def _get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        connect_args = {}
        if settings.database_url.startswith("sqlite"):
            # Requests may be served from different threads than the one that opened the file
            connect_args["check_same_thread"] = False
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug_mode,  # Log SQL queries in debug mode
            connect_args=connect_args,
        )
    return _engine


def get_db_session() -> Session:
    """
    Open a session for one repository call.

    Sessions keep loaded rows usable after commit so adapters can map them to DTOs.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=_get_engine()
        )
    return _SessionLocal()
