"""Database engine and per-request sessions"""

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session
from balance_gateway.config import settings


def build_engine(database_url: str):
    """Create an engine; SQLite connections are shared across the request threadpool"""
    if make_url(database_url).get_backend_name() == "sqlite":
        return create_engine(database_url, connect_args={"check_same_thread": False})
    # Recycle after 1 hour to avoid stale connections
    return create_engine(database_url, pool_pre_ping=True, pool_recycle=3600)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
