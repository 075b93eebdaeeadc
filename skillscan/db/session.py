# skillscan/db/session.py
from contextlib import contextmanager
from typing import Generator, Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from skillscan.core.config import settings
from skillscan.core.errors import Unavailable
from skillscan.core.logging import get_logger

logger = get_logger(__name__)

DB_URL = settings.DATABASE_URL  # e.g., "sqlite:///./skillscan.db"

# SQLite-friendly connect args; the busy timeout bounds how long a locked write waits
is_sqlite = DB_URL.startswith("sqlite")
connect_args = {"check_same_thread": False, "timeout": settings.DB_TIMEOUT_SECONDS} if is_sqlite else {}
engine_kwargs = {} if is_sqlite else {"pool_timeout": settings.DB_TIMEOUT_SECONDS}

engine = create_engine(
    DB_URL,
    future=True,
    pool_pre_ping=True,
    connect_args=connect_args,
    **engine_kwargs,
)

def _unicode_lower(value):
    # SQLite's built-in lower() only folds ASCII
    return value.lower() if isinstance(value, str) else value

# Enable WAL + sane pragmas for SQLite
if is_sqlite:
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.close()
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)

SessionLocal = sessionmaker(
    bind=engine,
    future=True,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped Session.
    Every store call in a request shares it; each write commits on its own.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def storage_call(db: Session, action: str) -> Iterator[Session]:
    """Roll back and re-raise storage failures as Unavailable."""
    try:
        yield db
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Storage call failed", action=action, error=str(e))
        raise Unavailable(f"Storage unavailable while trying to {action}") from e
