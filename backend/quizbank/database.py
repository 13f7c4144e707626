"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (for local testing without Docker).
One process-wide engine; init_db() at app startup, dispose_engine() at shutdown.
Routes get a request-scoped session through get_db (overridable in tests).
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from quizbank.config import settings

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def make_engine(url: str):
    """Build an engine for url. In-memory SQLite shares one connection across threads."""
    is_sqlite = url.startswith("sqlite")
    kwargs = {"echo": False}
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind=None):
    """Create all tables (idempotent). Call once at app startup."""
    # Import all models so they register with Base before create_all
    from quizbank.models import user, matiere, question  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database ready: %s", (bind or engine).url.render_as_string(hide_password=True))


def dispose_engine():
    """Close pooled connections. Call at app shutdown."""
    engine.dispose()
    logger.info("Database connections closed")


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
