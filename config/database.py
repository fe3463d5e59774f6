"""
Database setup - SQLAlchemy engine, session factory and declarative base.

The shopping list and the saved orders live in a small local database
(SQLite by default, see Settings.database_url).
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import get_settings

settings = get_settings()

_connect_args = {}
if settings.database_url.startswith("sqlite"):
    # Streamlit serves reruns from worker threads
    _connect_args = {"check_same_thread": False}

engine = create_engine(settings.database_url, connect_args=_connect_args)

SessionLocal = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a database session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all tables that do not exist yet."""
    # Import entities so they register on Base.metadata
    import models.entities  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
