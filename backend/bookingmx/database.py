"""
Database configuration - SQLAlchemy persistence layer
Only used when RESERVATION_STORE=sql; the default store keeps everything in memory
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from bookingmx.config import settings

Base = declarative_base()


def create_db_engine(url: str = None) -> Engine:
    """Create an engine; SQLite connections are shared across request threads"""
    url = url or settings.DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create tables"""
    from bookingmx.models import orm  # noqa
    Base.metadata.create_all(bind=engine)
