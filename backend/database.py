from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import get_settings

settings = get_settings()
DATABASE_URL = settings.database_url


def build_engine(url: str):
    """
    Create an engine for the given URL.

    SQLite databases get the WAL / foreign key pragmas applied on every
    connection. No files or directories are created here; see
    ensure_database_directory().
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != 'sqlite':
        return create_engine(url, pool_pre_ping=True)

    sqlite_engine = create_engine(
        url,
        connect_args={'check_same_thread': False},
        echo=False,
    )

    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_database_directory(url) -> None:
    """
    Create the parent directory of a file-backed SQLite database.

    Args:
        url: Database URL (string or sqlalchemy URL); non-SQLite URLs are ignored
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != 'sqlite':
        return
    if parsed.database and parsed.database != ':memory:':
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
