"""Database session management"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from debt_planner.config import settings
from debt_planner.infrastructure.database.models import Base


def _engine_options(url: str) -> dict:
    # SQLite connections are handed between threadpool workers
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    # Recycle after 1 hour to avoid stale server-side connections
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 10, "pool_recycle": 3600}


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
