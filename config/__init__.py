"""
Config Package - Application configuration, database and logging setup.
"""

from config.settings import Settings, get_settings
from config.database import SessionLocal, Base, get_db, engine, init_db
from config.logging import configure_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Database
    "SessionLocal",
    "Base",
    "get_db",
    "engine",
    "init_db",
    # Logging
    "configure_logging",
]
